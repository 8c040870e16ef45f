"""Slash command webhook body parsing."""

import logging
import re
from typing import Optional, Union
from urllib.parse import parse_qs

from pydantic import ValidationError

from src.models.slash_command import InboundCommand
from src.utils.errors import SlashCommandParseError

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Form field name -> InboundCommand attribute
_FIELD_MAP = {
    "command": "name",
    "text": "text",
    "user_name": "username",
    "user_id": "user_id",
    "channel_id": "channel_id",
    "channel_name": "channel_name",
    "team_id": "team_id",
    "team_domain": "team_domain",
    "enterprise_id": "enterprise_id",
    "enterprise_name": "enterprise_name",
    "response_url": "response_url",
    "trigger_id": "trigger_id",
    "api_app_id": "api_app_id",
    "token": "token",
}


def parse_slash_command(
    raw_body: Union[bytes, str],
    content_type: Optional[str] = None
) -> InboundCommand:
    """
    Parse a form-encoded slash command body into an InboundCommand.

    Raises SlashCommandParseError if the body is not a form payload or
    has no command field. Missing text/user_name become empty strings.
    """
    if content_type:
        media_type = content_type.split(";", 1)[0].strip().lower()
        if media_type != FORM_CONTENT_TYPE:
            raise SlashCommandParseError(f"Unsupported content type: {media_type}")

    if isinstance(raw_body, bytes):
        try:
            raw_body = raw_body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SlashCommandParseError(f"Body is not valid UTF-8: {e}") from e

    if _BAD_ESCAPE_RE.search(raw_body):
        raise SlashCommandParseError("Malformed percent escape in form body")

    # Empty "&"-separated segments are skipped; escapes must decode to UTF-8
    try:
        form = parse_qs(raw_body, keep_blank_values=True, errors="strict")
    except ValueError as e:
        raise SlashCommandParseError(f"Malformed form body: {e}") from e

    if "command" not in form:
        raise SlashCommandParseError("Missing 'command' field")

    fields = {attr: form[key][0] for key, attr in _FIELD_MAP.items() if key in form}

    try:
        return InboundCommand(**fields)
    except ValidationError as e:
        raise SlashCommandParseError(f"Invalid slash command payload: {e}") from e
