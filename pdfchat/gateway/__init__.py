"""Gateway to the hosted Gemini model.

Responsibilities:
    - Environment-driven endpoint and credential configuration
    - Projection of conversation turns into the request schema
    - Single-shot HTTP calls and response envelope unwrapping

Maintains clean separation from the conversation state and the UI.
"""

from pdfchat.gateway.client import (
    ApiError,
    FormatError,
    GatewayError,
    GeminiClient,
    NetworkError,
)
from pdfchat.gateway.config import ChatConfig, get_chat_config
from pdfchat.gateway.formatter import build_request

__all__ = [
    "ApiError",
    "ChatConfig",
    "FormatError",
    "GatewayError",
    "GeminiClient",
    "NetworkError",
    "build_request",
    "get_chat_config",
]
