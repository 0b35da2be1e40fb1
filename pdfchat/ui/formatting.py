"""Display helpers for the chat page."""

from datetime import datetime

from pdfchat.models.schemas import Message, MessageStatus

_SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


def format_file_size(size: int) -> str:
    """Format a byte count, e.g. ``1536`` -> ``1.5 KB``."""
    if size <= 0:
        return "0 Bytes"
    value = float(size)
    exponent = 0
    while value >= 1024 and exponent < len(_SIZE_UNITS) - 1:
        value /= 1024
        exponent += 1
    return f"{round(value, 2):g} {_SIZE_UNITS[exponent]}"


def format_timestamp(when: datetime, now: datetime | None = None) -> str:
    """Relative time label: ``Just now``, a clock time today, or a date."""
    now = now or datetime.now()
    hours = (now - when).total_seconds() / 3600
    if hours < 1:
        return "Just now"
    if hours < 24:
        return when.strftime("%H:%M")
    return when.strftime("%x")


def message_footer(message: Message, now: datetime | None = None) -> str:
    """Footer line under a message bubble, e.g. ``Just now • 2 tokens``."""
    parts = [format_timestamp(message.timestamp, now)]
    if message.metadata and message.metadata.tokens:
        parts.append(f"{message.metadata.tokens} tokens")
    if message.metadata and message.metadata.model:
        parts.append(message.metadata.model)
    if message.status is MessageStatus.ERROR:
        parts.append("Error")
    return " • ".join(parts)


def model_display_name(model_name: str) -> str:
    """Human label for a model id, e.g. ``gemini-2.0-flash`` -> ``Gemini 2.0 Flash``."""
    return " ".join(word.capitalize() for word in model_name.split("-"))
