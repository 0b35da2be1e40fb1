"""Gateway configuration with environment variable loading.

Pydantic-based configuration for the Gemini generation endpoint.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class ChatConfig(BaseModel):
    """Configuration for the Gemini gateway client.

    Attributes:
        api_key: API key sent as the ``key`` query parameter.
        api_base_url: Base URL of the generative language API.
        model_name: Model identifier to use.
        request_timeout: Seconds to wait for a complete response.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", ""),
        description="API key for the Gemini API",
    )
    api_base_url: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_BASE_URL") or DEFAULT_API_BASE_URL,
        description="Base URL of the generative language API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.0-flash"),
        description="Model to use",
    )
    request_timeout: float = Field(
        default=120.0,
        gt=0.0,
        le=600.0,
        description="Seconds to wait for a complete response",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set GEMINI_API_KEY in .env")
        return v.strip()

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def endpoint_url(self) -> str:
        """Full ``generateContent`` URL for the configured model."""
        return f"{self.api_base_url}/models/{self.model_name}:generateContent"


def get_chat_config() -> ChatConfig:
    """Create gateway configuration from environment.

    Returns:
        Configured ChatConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return ChatConfig()
