"""Conversation domain models.

All models are frozen: state changes produce new instances, which keeps the
conversation store and upload manager free of shared mutable state.
"""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

WELCOME_ID = "welcome"


def new_id(prefix: str) -> str:
    """Return a unique identifier such as ``user-3f2a...``."""
    return f"{prefix}-{uuid4().hex}"


class Sender(str, Enum):
    """Who authored a message."""

    USER = "user"
    ASSISTANT = "assistant"


class MessageStatus(str, Enum):
    """Delivery status of a message."""

    SENDING = "sending"
    SENT = "sent"
    ERROR = "error"


class MessageMetadata(BaseModel):
    """Generation details attached to assistant replies.

    Attributes:
        model: Model identifier that produced the reply.
        tokens: Estimated token count (characters / 4, not a tokenizer count).
    """

    model_config = ConfigDict(frozen=True)

    model: str | None = None
    tokens: int | None = Field(default=None, ge=0)


class Message(BaseModel):
    """A single turn in the conversation.

    Attributes:
        id: Unique message identifier.
        content: Message text.
        sender: Author of the message.
        timestamp: Creation time.
        status: Delivery status; only ``sending`` may change.
        metadata: Optional generation details.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: new_id("msg"))
    content: str
    sender: Sender
    timestamp: datetime = Field(default_factory=datetime.now)
    status: MessageStatus = MessageStatus.SENT
    metadata: MessageMetadata | None = None

    @property
    def is_welcome(self) -> bool:
        """Whether this is the synthetic greeting seeded into each session."""
        return self.id == WELCOME_ID or self.id.startswith(f"{WELCOME_ID}-")

    def with_status(self, status: MessageStatus) -> "Message":
        """Return a copy with a new status.

        Args:
            status: Target status.

        Returns:
            The updated message.

        Raises:
            ValueError: If the message is not ``sending`` or the target is
                ``sending``.
        """
        if self.status is not MessageStatus.SENDING or status is MessageStatus.SENDING:
            raise ValueError(
                f"Invalid status transition: {self.status.value} -> {status.value}"
            )
        return self.model_copy(update={"status": status})


class ChatSession(BaseModel):
    """The active conversation.

    Attributes:
        id: Session identifier.
        title: Display label, derived once from the first user message.
        messages: Ordered turns, oldest first.
        created_at: Session creation time.
        updated_at: Time of the last change.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: new_id("session"))
    title: str = "New Conversation"
    messages: tuple[Message, ...] = Field(..., min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class UploadedFile(BaseModel):
    """A parsed PDF waiting to be sent with the next message.

    Attributes:
        id: Attachment identifier.
        name: Original filename.
        size: File size in bytes.
        mime_type: MIME type reported at selection time.
        extracted_text: Page-labelled text of the document.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: new_id("file"))
    name: str
    size: int = Field(ge=0)
    mime_type: str
    extracted_text: str | None = None
