"""Outbound Slack Web API client construction."""

import os
import logging
from typing import Optional
from slack_sdk import WebClient
from src.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


def get_slack_token() -> str:
    """Get the Slack bot token from environment."""
    # strip to remove any trailing newlines from env var
    token = os.environ.get("SLACK_TOKEN", "").strip()
    if not token:
        raise ConfigurationError("SLACK_TOKEN not set")
    return token


def create_slack_client(token: Optional[str] = None) -> WebClient:
    """
    Build a Slack WebClient for the bot.

    Built once at startup and handed to the dispatcher. The slash command
    path answers synchronously and does not call the Web API.
    """
    client = WebClient(token=token or get_slack_token())
    logger.info("Slack client initialized")
    return client
