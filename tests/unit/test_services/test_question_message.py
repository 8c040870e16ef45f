"""Tests for the question message composer."""

import pytest
from src.models.message import (
    ActionsBlock,
    ContextBlock,
    ResponseType,
    SectionBlock,
    TextFormat,
)
from src.services.question_message import compose_question_message
from tests.utils.factories import TRICKY_TEXTS, TRICKY_USERNAMES, create_question_text, create_username


@pytest.mark.unit
def test_standup_question_scenario():
    """Test the basic question scenario."""
    message = compose_question_message("What time is standup?", "alex")

    section, context, actions = message.blocks
    assert section.fields[0].text == "What time is standup?"
    assert context.elements[0].text == "Asked by @alex"


@pytest.mark.unit
def test_block_order_is_fixed():
    """Test that blocks are always section, context, actions."""
    message = compose_question_message(create_question_text(), create_username())

    assert len(message.blocks) == 3
    assert isinstance(message.blocks[0], SectionBlock)
    assert isinstance(message.blocks[1], ContextBlock)
    assert isinstance(message.blocks[2], ActionsBlock)


@pytest.mark.unit
def test_response_is_in_channel():
    """Test that the message is visible to the whole channel."""
    message = compose_question_message("q", "u")
    assert message.response_type == ResponseType.IN_CHANNEL


@pytest.mark.unit
@pytest.mark.parametrize("text", TRICKY_TEXTS)
def test_section_text_passed_through_verbatim(text):
    """Test that question text is not escaped, trimmed or validated."""
    message = compose_question_message(text, "alex")

    section = message.blocks[0]
    assert len(section.fields) == 1
    assert section.fields[0].type == TextFormat.MARKDOWN
    assert section.fields[0].text == text


@pytest.mark.unit
@pytest.mark.parametrize("username", TRICKY_USERNAMES)
def test_attribution_is_literal_concatenation(username):
    """Test that username is substituted without escaping."""
    message = compose_question_message("q", username)

    context = message.blocks[1]
    assert len(context.elements) == 1
    assert context.elements[0].type == TextFormat.MARKDOWN
    assert context.elements[0].text == "Asked by @" + username


@pytest.mark.unit
@pytest.mark.parametrize("text,username", [("", ""), ("*x*", "@y"), ("{username}", "{text}")])
def test_buttons_fixed_regardless_of_input(text, username):
    """Test that View then Answer buttons are always present."""
    message = compose_question_message(text, username)

    buttons = message.blocks[2].elements
    assert [(b.label, b.action_id) for b in buttons] == [
        ("View", "viewButton"),
        ("Answer", "answerButton"),
    ]
    assert all(b.text.type == TextFormat.PLAIN for b in buttons)


@pytest.mark.unit
def test_compose_is_deterministic():
    """Test that equal inputs give equal documents and encodings."""
    first = compose_question_message("Same question", "sam")
    second = compose_question_message("Same question", "sam")

    assert first == second
    assert first.to_json() == second.to_json()
