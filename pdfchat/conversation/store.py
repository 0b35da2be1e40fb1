"""Conversation state for the active chat session.

State changes are pure functions from one ``ChatSession`` to the next;
``ConversationStore`` applies them one at a time.
"""

import logging
import threading
from datetime import datetime

from pdfchat.models.schemas import (
    WELCOME_ID,
    ChatSession,
    Message,
    MessageStatus,
    Sender,
    new_id,
)
from pdfchat.parsing.uploads import UploadManager

logger = logging.getLogger(__name__)

WELCOME_TEXT = (
    "Hello! I'm your AI assistant powered by Google Gemini. How can I help you today?"
)
DEFAULT_TITLE = "New Conversation"
FALLBACK_TITLE = "PDF Analysis"
TITLE_MAX_LENGTH = 50


def welcome_message(message_id: str = WELCOME_ID) -> Message:
    return Message(
        id=message_id,
        content=WELCOME_TEXT,
        sender=Sender.ASSISTANT,
        status=MessageStatus.SENT,
    )


def derive_title(content: str) -> str:
    """Build a session title from the first message of a conversation."""
    return (content or FALLBACK_TITLE)[:TITLE_MAX_LENGTH] + "..."


def new_session() -> ChatSession:
    return ChatSession(messages=(welcome_message(),))


def append_message(
    session: ChatSession, message: Message, title_source: str | None = None
) -> ChatSession:
    """Return ``session`` with ``message`` added at the end.

    The title is derived from the first user message and kept after.
    ``title_source`` overrides the text it is derived from, e.g. the raw
    input of an attachment-only send.
    """
    update: dict[str, object] = {
        "messages": (*session.messages, message),
        "updated_at": datetime.now(),
    }
    if message.sender is Sender.USER and not any(
        m.sender is Sender.USER for m in session.messages
    ):
        update["title"] = derive_title(
            message.content if title_source is None else title_source
        )
    return session.model_copy(update=update)


def reset_session(session: ChatSession) -> ChatSession:
    """Return ``session`` holding only a fresh welcome message."""
    return session.model_copy(
        update={
            "messages": (welcome_message(new_id(WELCOME_ID)),),
            "title": DEFAULT_TITLE,
            "updated_at": datetime.now(),
        }
    )


def update_message_status(
    session: ChatSession, message_id: str, status: MessageStatus
) -> ChatSession:
    """Return ``session`` with one message moved to a new status.

    Raises:
        KeyError: If no message has ``message_id``.
        ValueError: If the status transition is not allowed.
    """
    for index, message in enumerate(session.messages):
        if message.id == message_id:
            messages = list(session.messages)
            messages[index] = message.with_status(status)
            return session.model_copy(
                update={"messages": tuple(messages), "updated_at": datetime.now()}
            )
    raise KeyError(message_id)


class ConversationStore:
    """Holds the active session; the single source of truth for rendering."""

    def __init__(
        self,
        uploads: UploadManager | None = None,
        session: ChatSession | None = None,
    ) -> None:
        self._uploads = uploads
        self._session = session or new_session()
        self._lock = threading.Lock()

    @property
    def session(self) -> ChatSession:
        return self._session

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._session.messages

    def append(self, message: Message, title_source: str | None = None) -> ChatSession:
        with self._lock:
            self._session = append_message(self._session, message, title_source)
            return self._session

    def set_status(self, message_id: str, status: MessageStatus) -> ChatSession:
        with self._lock:
            self._session = update_message_status(self._session, message_id, status)
            return self._session

    def reset(self) -> ChatSession:
        """Start over with a new welcome message and no pending uploads."""
        with self._lock:
            self._session = reset_session(self._session)
        if self._uploads is not None:
            self._uploads.clear_all()
        logger.info("Conversation cleared")
        return self._session
