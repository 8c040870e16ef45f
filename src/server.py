"""Route table and local development server."""

import os
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Callable, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, Field

from api.health import health_payload
from api.v1.slash import handle_slash_request, write_slash_response
from src.services.slash_dispatcher import JSON_CONTENT_TYPE, SlashResponse
from src.utils.logging_config import LoggingConfig

logger = logging.getLogger(__name__)

RouteHandler = Callable[[bytes, Optional[str]], SlashResponse]


class Route(BaseModel):
    """One HTTP route."""
    path: str = Field(..., description="Exact request path")
    method: str = Field(..., description="HTTP method")
    name: str = Field(..., description="Route name for logs")
    handler: RouteHandler


def _health(raw_body: bytes, content_type: Optional[str] = None) -> SlashResponse:
    return SlashResponse(status_code=200, body=health_payload(), content_type=JSON_CONTENT_TYPE)


def get_routes() -> list[Route]:
    return [
        Route(path="/api/v1/slash", method="POST", name="slash", handler=handle_slash_request),
        Route(path="/api/health", method="GET", name="health", handler=_health),
        Route(path="/api/health", method="POST", name="health", handler=_health),
    ]


def find_route(routes: list[Route], method: str, path: str) -> SlashResponse | Route:
    """Return the matching route, or a 404/405 response."""
    path_matches = [route for route in routes if route.path == path]
    if not path_matches:
        return SlashResponse(status_code=404)
    for route in path_matches:
        if route.method == method:
            return route
    return SlashResponse(status_code=405)


class RouterHandler(BaseHTTPRequestHandler):
    """Request handler serving the route table."""

    routes: list[Route] = []

    def _route(self, method: str) -> None:
        path = urlsplit(self.path).path
        match = find_route(self.routes, method, path)
        if isinstance(match, SlashResponse):
            logger.warning(f"No route for {method} {path}: {match.status_code}")
            write_slash_response(self, match)
            return

        content_length = int(self.headers.get('Content-Length', 0) or 0)
        raw_body = self.rfile.read(content_length) if content_length > 0 else b""
        write_slash_response(self, match.handler(raw_body, self.headers.get('Content-Type')))

    def do_GET(self):
        self._route("GET")

    def do_POST(self):
        self._route("POST")


def serve(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Run the development server until interrupted."""
    LoggingConfig.setup_logging()
    host = host or os.environ.get("HOST", "0.0.0.0")
    port = port or int(os.environ.get("PORT", "8080"))

    RouterHandler.routes = get_routes()
    httpd = ThreadingHTTPServer((host, port), RouterHandler)
    logger.info(f"Serving on {host}:{port}")
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        httpd.server_close()


if __name__ == "__main__":
    serve()
