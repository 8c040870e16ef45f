"""Test helper functions."""

from io import BytesIO
from typing import Dict, Optional
from unittest.mock import Mock
from urllib.parse import urlencode

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def create_slash_body(
    command: str = "/suru",
    text: str = "Test question",
    user_name: str = "alex",
    **extra: str
) -> bytes:
    """Create a form-encoded slash command body for testing."""
    fields = {"command": command, "text": text, "user_name": user_name}
    fields.update(extra)
    return urlencode(fields).encode("utf-8")


def create_http_request(
    method: str,
    path: str,
    body: bytes = b"",
    headers: Optional[Dict[str, str]] = None
) -> bytes:
    """Build raw HTTP/1.1 request bytes."""
    headers = dict(headers or {})
    headers.setdefault("Content-Length", str(len(body)))
    head = f"{method} {path} HTTP/1.1\r\n"
    head += "".join(f"{key}: {value}\r\n" for key, value in headers.items())
    return head.encode("utf-8") + b"\r\n" + body


def run_handler(handler_class, method: str, path: str, body: bytes = b"", headers=None):
    """
    Run a request through a handler class and capture its output.

    Returns (handler, status_code, headers_dict, body_bytes).
    """
    raw = create_http_request(method, path, body, headers)
    h = handler_class.__new__(handler_class)
    h.rfile = BytesIO(raw)
    h.wfile = BytesIO()
    h.client_address = ("127.0.0.1", 8000)
    h.server = Mock()

    sent_headers: Dict[str, str] = {}
    h.send_response = Mock()
    h.send_header = Mock(side_effect=lambda key, value: sent_headers.__setitem__(key, value))
    h.end_headers = Mock()

    h.raw_requestline = h.rfile.readline()
    h.parse_request()
    getattr(h, f"do_{method}")()

    return h, h.send_response.call_args[0][0], sent_headers, h.wfile.getvalue()
