"""HTTP client for the Gemini ``generateContent`` endpoint.

One POST per call, no retries and no streaming: the full response is awaited
and unwrapped to the text of the first candidate.
"""

import logging

import httpx
from pydantic import ValidationError

from pdfchat.gateway.config import ChatConfig, get_chat_config
from pdfchat.models.payloads import GenerateContentRequest, GenerateContentResponse

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """Base class for failures while sending a request."""

    pass


class NetworkError(GatewayError):
    """The request could not be delivered or the connection failed."""

    pass


class ApiError(GatewayError):
    """The endpoint answered with a non-success status.

    Attributes:
        status_code: HTTP status code.
        body: Raw response body.
    """

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        super().__init__(f"API request failed: {status_code} {reason}".rstrip())
        self.status_code = status_code
        self.body = body


class FormatError(GatewayError):
    """The response body did not have the expected shape."""

    pass


class GeminiClient:
    """Sends request payloads to the configured model."""

    def __init__(
        self,
        config: ChatConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional gateway configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, used by tests.
        """
        self._config = config or get_chat_config()
        self._transport = transport

    @property
    def model_name(self) -> str:
        return self._config.model_name

    async def send(self, payload: GenerateContentRequest) -> str:
        """Send a request and return the generated text.

        Args:
            payload: Request body built by the request formatter.

        Returns:
            Text of the first part of the first candidate.

        Raises:
            NetworkError: Connection or transport failure.
            ApiError: Non-2xx response.
            FormatError: Response body missing the expected fields.
        """
        logger.debug(f"Calling {self._config.model_name} with {len(payload.contents)} turns")

        async with httpx.AsyncClient(
            timeout=self._config.request_timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(
                    self._config.endpoint_url,
                    params={"key": self._config.api_key},
                    json=payload.model_dump(),
                )
            except httpx.RequestError as e:
                logger.error(f"Request to generation API failed: {e}")
                raise NetworkError(f"Connection failed: {e}") from e

        if not response.is_success:
            logger.error(f"API error: {response.status_code} {response.text}")
            raise ApiError(response.status_code, response.reason_phrase, response.text)

        try:
            envelope = GenerateContentResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Unexpected response shape: {e}")
            raise FormatError("Unexpected response format from API") from e

        return envelope.text
