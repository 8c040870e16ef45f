"""Block Kit message models for slash command responses."""

import json
from enum import Enum
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field

from src.utils.errors import MessageSerializationError


class TextFormat(str, Enum):
    """Text object formats."""
    MARKDOWN = "mrkdwn"
    PLAIN = "plain_text"


class ResponseType(str, Enum):
    """Who sees the slash command response."""
    IN_CHANNEL = "in_channel"
    EPHEMERAL = "ephemeral"


class TextObject(BaseModel):
    """Text composition object. Content is passed through verbatim."""
    type: TextFormat = Field(..., description="mrkdwn or plain_text")
    text: str = Field(..., description="Text content")

    @classmethod
    def markdown(cls, content: str) -> "TextObject":
        return cls(type=TextFormat.MARKDOWN, text=content)

    @classmethod
    def plain(cls, content: str) -> "TextObject":
        return cls(type=TextFormat.PLAIN, text=content)


class ButtonElement(BaseModel):
    """Interactive button; action_id is what a callback handler matches on."""
    type: Literal["button"] = "button"
    text: TextObject = Field(..., description="Plain text label")
    action_id: str = Field(..., description="Opaque action identifier")
    value: Optional[str] = Field(None, description="Payload sent back with the interaction")

    @classmethod
    def create(cls, label: str, identifier: str) -> "ButtonElement":
        return cls(text=TextObject.plain(label), action_id=identifier, value=identifier)

    @property
    def label(self) -> str:
        return self.text.text


class SectionBlock(BaseModel):
    """Section block rendering its text objects as fields."""
    type: Literal["section"] = "section"
    block_id: Optional[str] = None
    fields: list[TextObject] = Field(..., min_length=1)


class ContextBlock(BaseModel):
    """Context block with small attribution text."""
    type: Literal["context"] = "context"
    block_id: Optional[str] = None
    elements: list[TextObject] = Field(..., min_length=1)


class ActionsBlock(BaseModel):
    """Row of interactive buttons, rendered in list order."""
    type: Literal["actions"] = "actions"
    block_id: Optional[str] = None
    elements: list[ButtonElement] = Field(..., min_length=1)


Block = Annotated[
    Union[SectionBlock, ContextBlock, ActionsBlock],
    Field(discriminator="type"),
]


class MessageDocument(BaseModel):
    """Ordered blocks plus response visibility."""
    response_type: ResponseType = Field(default=ResponseType.EPHEMERAL)
    blocks: list[Block] = Field(..., min_length=1, description="Blocks in rendering order")

    def to_payload(self) -> dict:
        """Slack-ready dict; unset optional keys are dropped."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        """
        Canonical JSON encoding with 4-space indentation.

        Key order follows model field order so equal documents always
        encode to identical strings.
        """
        try:
            return json.dumps(self.to_payload(), indent=4, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise MessageSerializationError(f"Failed to serialize message: {e}") from e

    def to_bytes(self) -> bytes:
        """UTF-8 response body; lone surrogates raise MessageSerializationError."""
        encoded = self.to_json()
        try:
            return encoded.encode("utf-8")
        except UnicodeEncodeError as e:
            raise MessageSerializationError(f"Message is not valid UTF-8: {e}") from e
