"""Health check endpoint."""

from http.server import BaseHTTPRequestHandler
import json

from src.utils.logging_config import SERVICE_NAME


def health_payload() -> bytes:
    return json.dumps({"status": "ok", "service": SERVICE_NAME}).encode('utf-8')


class handler(BaseHTTPRequestHandler):
    """Health check handler for Vercel serverless function."""

    def do_GET(self):
        """Handle GET request."""
        body = health_payload()
        self.send_response(200)
        self.send_header('Content-Type', 'application/json')
        self.send_header('Content-Length', str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_POST(self):
        """Handle POST request (same as GET for health check)."""
        self.do_GET()
