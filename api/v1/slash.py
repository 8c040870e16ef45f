"""Slack slash command webhook endpoint for Vercel (POST /api/v1/slash)."""

from http.server import BaseHTTPRequestHandler
import logging
from typing import Optional

from src.services.slack_client import create_slack_client
from src.services.slash_dispatcher import SlashDispatcher, SlashResponse, build_default_dispatcher
from src.utils.errors import ConfigurationError
from src.utils.logging import correlation_context
from src.utils.logging_config import LoggingConfig

LoggingConfig.setup_logging()
_logger = logging.getLogger(__name__)

_dispatcher: Optional[SlashDispatcher] = None


def get_dispatcher() -> SlashDispatcher:
    """Build the dispatcher once per process."""
    global _dispatcher

    if _dispatcher is None:
        try:
            slack_client = create_slack_client()
        except ConfigurationError as e:
            _logger.warning(f"Slack client not configured: {e}")
            slack_client = None
        _dispatcher = build_default_dispatcher(slack_client=slack_client)

    return _dispatcher


def handle_slash_request(raw_body: bytes, content_type: Optional[str] = None) -> SlashResponse:
    """Dispatch one webhook body inside its own correlation context."""
    with correlation_context():
        try:
            return get_dispatcher().handle(raw_body, content_type)
        except Exception as e:
            _logger.error(f"Error processing slash command: {e}", exc_info=True)
            return SlashResponse(status_code=500)


def write_slash_response(request_handler: BaseHTTPRequestHandler, response: SlashResponse) -> None:
    """Write status, headers and body for a SlashResponse."""
    request_handler.send_response(response.status_code)
    if response.body and response.content_type:
        request_handler.send_header('Content-Type', response.content_type)
    request_handler.send_header('Content-Length', str(len(response.body)))
    request_handler.end_headers()
    if response.body:
        request_handler.wfile.write(response.body)


class handler(BaseHTTPRequestHandler):
    """Vercel serverless function handler for slash commands."""

    def do_POST(self):
        """Handle POST request from Slack."""
        content_length = int(self.headers.get('Content-Length', 0) or 0)
        raw_body = self.rfile.read(content_length) if content_length > 0 else b""

        response = handle_slash_request(raw_body, self.headers.get('Content-Type'))
        write_slash_response(self, response)
