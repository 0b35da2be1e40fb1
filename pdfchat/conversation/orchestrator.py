"""Turn orchestration: user submission to assistant reply.

Only one request is in flight at a time. Submissions made while a reply is
pending are ignored rather than queued.
"""

import logging
from collections.abc import Callable
from enum import Enum

from pdfchat.conversation.store import ConversationStore
from pdfchat.gateway.client import GatewayError, GeminiClient
from pdfchat.gateway.formatter import build_request
from pdfchat.models.schemas import Message, MessageMetadata, MessageStatus, Sender, new_id
from pdfchat.parsing.uploads import UploadManager

logger = logging.getLogger(__name__)

ATTACHMENT_ONLY_PLACEHOLDER = "Uploaded PDF file(s)"


class TurnState(str, Enum):
    IDLE = "idle"
    SENDING = "sending"


def estimate_tokens(text: str) -> int:
    """Rough token estimate of four characters per token."""
    return len(text) // 4


def error_reply_text(reason: str) -> str:
    return (
        "I apologize, but I encountered an error while processing your request: "
        f"{reason}. Please try again."
    )


class TurnOrchestrator:
    """Runs a conversation turn against the store, uploads and client."""

    def __init__(
        self,
        store: ConversationStore,
        uploads: UploadManager,
        client: GeminiClient,
        model_name: str | None = None,
        on_update: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            store: Conversation the turns are appended to.
            uploads: Pending attachments consumed by each send.
            client: Gateway used to generate replies.
            model_name: Model recorded in reply metadata.
                        Defaults to the client's model.
            on_update: Called after every state change, e.g. to re-render.
        """
        self._store = store
        self._uploads = uploads
        self._client = client
        self._model_name = model_name or client.model_name
        self._on_update = on_update
        self._state = TurnState.IDLE

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def is_sending(self) -> bool:
        return self._state is TurnState.SENDING

    def can_submit(self, text: str) -> bool:
        """Whether ``text`` plus pending uploads would start a turn now."""
        if self.is_sending:
            return False
        return bool(text.strip()) or bool(self._uploads.list_pending())

    def _notify(self) -> None:
        if self._on_update is not None:
            self._on_update()

    async def submit(self, text: str) -> Message | None:
        """Send a user turn and append the reply.

        Everything up to the request dispatch happens before the first await,
        so the user message and cleared attachments are visible immediately.

        Args:
            text: Raw input text.

        Returns:
            The assistant reply (``status=error`` on failure), or None if
            nothing was submitted or the conversation was cleared before the
            reply arrived.
        """
        if not self.can_submit(text):
            logger.debug(f"Ignoring submit in state {self._state.value}")
            return None

        self._state = TurnState.SENDING
        try:
            pending = self._uploads.list_pending()
            attachment_text = "\n\n".join(
                f.extracted_text for f in pending if f.extracted_text
            )
            user_message = Message(
                id=new_id("user"),
                content=text.strip() or ATTACHMENT_ONLY_PLACEHOLDER,
                sender=Sender.USER,
                status=MessageStatus.SENT,
            )
            history = self._store.messages
            self._store.append(user_message, title_source=text.strip())
            self._uploads.clear_all()
            self._notify()

            reply = await self._generate_reply([*history, user_message], attachment_text)

            if all(m.id != user_message.id for m in self._store.messages):
                logger.info("Conversation cleared while waiting; discarding reply")
                return None
            self._store.append(reply)
            return reply
        finally:
            self._state = TurnState.IDLE
            self._notify()

    async def _generate_reply(
        self, messages: list[Message], attachment_text: str
    ) -> Message:
        try:
            payload = build_request(messages, attachment_text)
            response_text = await self._client.send(payload)
        except GatewayError as e:
            return self._error_reply(str(e))
        except Exception as e:
            logger.exception("Unexpected failure while generating a response")
            return self._error_reply(str(e) or type(e).__name__)

        return Message(
            id=new_id("assistant"),
            content=response_text,
            sender=Sender.ASSISTANT,
            status=MessageStatus.SENT,
            metadata=MessageMetadata(
                model=self._model_name,
                tokens=estimate_tokens(response_text),
            ),
        )

    def _error_reply(self, reason: str) -> Message:
        return Message(
            id=new_id("error"),
            content=error_reply_text(reason),
            sender=Sender.ASSISTANT,
            status=MessageStatus.ERROR,
        )
