"""Slash command dispatch: command name -> message handler -> HTTP response."""

import os
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, Field

from src.models.message import MessageDocument
from src.models.slash_command import InboundCommand
from src.services.question_message import compose_question_message
from src.services.slash_parser import parse_slash_command
from src.utils.errors import (
    MessageSerializationError,
    SlashCommandParseError,
    UnknownCommandError,
)
from src.utils.logging import command_fields, get_structured_logger, log_timing

logger = get_structured_logger(__name__)

DEFAULT_COMMAND = "/suru"
JSON_CONTENT_TYPE = "application/json"

CommandHandler = Callable[[InboundCommand], MessageDocument]


class SlashResponse(BaseModel):
    """Status, body and content type to write back to Slack."""
    status_code: int = Field(..., description="HTTP status code")
    body: bytes = Field(default=b"", description="Response body, empty on failure")
    content_type: Optional[str] = Field(None, description="Set only when body is non-empty")


def get_command_name() -> str:
    """Get the registered slash command name from environment."""
    return os.environ.get("SLASH_COMMAND", DEFAULT_COMMAND).strip() or DEFAULT_COMMAND


def question_handler(command: InboundCommand) -> MessageDocument:
    """Answer a question command with the question message."""
    return compose_question_message(command.text, command.username)


class SlashDispatcher:
    """Route parsed slash commands to registered handlers by exact name."""

    def __init__(
        self,
        slack_client: Optional[Any] = None,
        handlers: Optional[dict[str, CommandHandler]] = None
    ):
        # Held for follow-up calls; the synchronous reply path never uses it
        self.slack_client = slack_client
        self._handlers: dict[str, CommandHandler] = dict(handlers or {})

    @property
    def commands(self) -> list[str]:
        return list(self._handlers)

    def register(self, name: str, handler: CommandHandler) -> None:
        """Register a handler for a command name, replacing any existing one."""
        self._handlers[name] = handler
        logger.debug("Registered slash command", command=name)

    def resolve(self, name: str) -> CommandHandler:
        """Exact, case-sensitive handler lookup."""
        try:
            return self._handlers[name]
        except KeyError:
            raise UnknownCommandError(name) from None

    def dispatch(self, command: InboundCommand) -> SlashResponse:
        """Run the handler for a parsed command and encode its message."""
        log = logger.bind(**command_fields(command))
        log.info("Command called")

        try:
            handler = self.resolve(command.name)
        except UnknownCommandError:
            log.error("Command not found")
            return SlashResponse(status_code=500)

        with log_timing("slash_dispatch", logger=log):
            message = handler(command)
            try:
                body = message.to_bytes()
            except MessageSerializationError as e:
                log.error("Error serializing message", error=str(e))
                return SlashResponse(status_code=500)

        log.info("Handled slash command with message response", block_count=len(message.blocks))
        return SlashResponse(status_code=200, body=body, content_type=JSON_CONTENT_TYPE)

    def handle(
        self,
        raw_body: Union[bytes, str],
        content_type: Optional[str] = None
    ) -> SlashResponse:
        """Parse a raw webhook body and dispatch it."""
        logger.info("Received a slash command", body_length=len(raw_body))

        try:
            command = parse_slash_command(raw_body, content_type)
        except SlashCommandParseError as e:
            logger.error("Error in parsing slash command", error=str(e))
            return SlashResponse(status_code=400)

        return self.dispatch(command)


def build_default_dispatcher(slack_client: Optional[Any] = None) -> SlashDispatcher:
    """Dispatcher with the question command registered."""
    dispatcher = SlashDispatcher(slack_client=slack_client)
    dispatcher.register(get_command_name(), question_handler)
    return dispatcher
