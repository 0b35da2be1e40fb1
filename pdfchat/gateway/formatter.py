"""Projection of the conversation into the generation API request schema."""

from collections.abc import Sequence

from pdfchat.models.payloads import Content, GenerateContentRequest, Part
from pdfchat.models.schemas import Message, Sender

ATTACHMENT_DELIMITER = "\n\n[Additional Context from uploaded PDF]:\n"

_ROLES = {Sender.USER: "user", Sender.ASSISTANT: "model"}


def build_request(
    messages: Sequence[Message],
    attachment_text: str | None = None,
) -> GenerateContentRequest:
    """Build the request body for a conversation.

    The welcome message is never sent. Attachment text is appended to the
    last entry only when that entry is a user turn.

    Args:
        messages: Conversation turns, oldest first.
        attachment_text: Extracted PDF text to send with the newest turn.

    Returns:
        A new request payload; ``messages`` is left untouched.
    """
    contents = [
        Content(role=_ROLES[msg.sender], parts=[Part(text=msg.content)])
        for msg in messages
        if not msg.is_welcome
    ]

    if attachment_text and contents and contents[-1].role == "user":
        last = contents[-1]
        contents[-1] = Content(
            role=last.role,
            parts=[Part(text=f"{last.parts[0].text}{ATTACHMENT_DELIMITER}{attachment_text}")],
        )

    return GenerateContentRequest(contents=contents)
