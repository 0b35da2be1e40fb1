"""Pydantic models for the conversation and the generation API.

Provides type safety and validation for everything that crosses a module
boundary.

Models:
    - Message: Individual turn in the conversation
    - ChatSession: The active conversation with its metadata
    - UploadedFile: Parsed PDF attachment pending submission
    - GenerateContentRequest: Outgoing request body
    - GenerateContentResponse: Incoming response envelope
"""

from pdfchat.models.payloads import (
    Content,
    GenerateContentRequest,
    GenerateContentResponse,
    Part,
)
from pdfchat.models.schemas import (
    ChatSession,
    Message,
    MessageMetadata,
    MessageStatus,
    Sender,
    UploadedFile,
)

__all__ = [
    "ChatSession",
    "Content",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "Message",
    "MessageMetadata",
    "MessageStatus",
    "Part",
    "Sender",
    "UploadedFile",
]
