"""Slash command models."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class InboundCommand(BaseModel):
    """Slash command invocation parsed from the webhook form body."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Command name including the leading slash, e.g. /suru")
    text: str = Field(default="", description="Free text typed after the command, unvalidated")
    username: str = Field(default="", description="Slack user name of the invoker")
    user_id: Optional[str] = Field(None, description="Slack user ID")
    channel_id: Optional[str] = Field(None, description="Slack channel ID")
    channel_name: Optional[str] = Field(None, description="Slack channel name")
    team_id: Optional[str] = Field(None, description="Slack workspace ID")
    team_domain: Optional[str] = Field(None, description="Slack workspace domain")
    enterprise_id: Optional[str] = None
    enterprise_name: Optional[str] = None
    response_url: Optional[str] = Field(None, description="URL for delayed responses")
    trigger_id: Optional[str] = Field(None, description="Trigger ID for opening modals")
    api_app_id: Optional[str] = None
    token: Optional[str] = Field(None, description="Deprecated verification token", repr=False)
