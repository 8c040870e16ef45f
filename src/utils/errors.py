"""Error handling utilities."""


class SuruBotError(Exception):
    """Base exception for SuruBot backend."""
    pass


class SlashCommandParseError(SuruBotError):
    """Inbound slash command payload could not be parsed."""
    pass


class UnknownCommandError(SuruBotError):
    """No handler registered for the slash command name."""

    def __init__(self, command_name: str):
        self.command_name = command_name
        super().__init__(f"Command not found: {command_name!r}")


class MessageSerializationError(SuruBotError):
    """Message document could not be encoded."""
    pass


class ConfigurationError(SuruBotError):
    """Required configuration is missing."""
    pass
