"""Question message composer for the /suru command."""

from src.models.message import (
    ActionsBlock,
    ButtonElement,
    ContextBlock,
    MessageDocument,
    ResponseType,
    SectionBlock,
    TextObject,
)

CONTEXT_BLOCK_ID = "context"
CONTEXT_TEXT = "Asked by @{username}"

VIEW_BUTTON_TEXT = "View"
VIEW_BUTTON_ID = "viewButton"

ANSWER_BUTTON_TEXT = "Answer"
ANSWER_BUTTON_ID = "answerButton"


def compose_question_message(text: str, username: str) -> MessageDocument:
    """
    Build the in-channel question message.

    Always returns three blocks in order: the question text, the
    attribution context, and the View/Answer buttons. Neither argument
    is escaped or trimmed.
    """
    question_section = SectionBlock(fields=[TextObject.markdown(text)])

    attribution = ContextBlock(
        block_id=CONTEXT_BLOCK_ID,
        elements=[TextObject.markdown(CONTEXT_TEXT.format(username=username))],
    )

    buttons = ActionsBlock(
        elements=[
            ButtonElement.create(VIEW_BUTTON_TEXT, VIEW_BUTTON_ID),
            ButtonElement.create(ANSWER_BUTTON_TEXT, ANSWER_BUTTON_ID),
        ]
    )

    return MessageDocument(
        response_type=ResponseType.IN_CHANNEL,
        blocks=[question_section, attribution, buttons],
    )
