"""Unit tests for conversation domain models."""

import pytest
import pytest_check as check
from pydantic import ValidationError

from pdfchat.models.payloads import GenerateContentResponse
from pdfchat.models.schemas import Message, MessageStatus, Sender, UploadedFile


class TestMessage:
    def test_defaults(self) -> None:
        message = Message(content="Hi", sender=Sender.USER)

        check.equal(message.status, MessageStatus.SENT)
        check.is_none(message.metadata)
        check.is_false(message.is_welcome)

    def test_ids_are_unique(self) -> None:
        first = Message(content="a", sender=Sender.USER)
        second = Message(content="a", sender=Sender.USER)

        assert first.id != second.id

    @pytest.mark.parametrize("message_id", ["welcome", "welcome-1a2b"])
    def test_welcome_ids(self, message_id: str) -> None:
        message = Message(id=message_id, content="Hello", sender=Sender.ASSISTANT)

        assert message.is_welcome

    def test_messages_are_frozen(self) -> None:
        message = Message(content="Hi", sender=Sender.USER)

        with pytest.raises(ValidationError):
            message.content = "changed"

    @pytest.mark.parametrize("target", [MessageStatus.SENT, MessageStatus.ERROR])
    def test_sending_can_settle(self, target: MessageStatus) -> None:
        message = Message(content="Hi", sender=Sender.USER, status=MessageStatus.SENDING)

        updated = message.with_status(target)

        check.equal(updated.status, target)
        check.equal(updated.id, message.id)
        check.equal(message.status, MessageStatus.SENDING)

    def test_settled_status_is_final(self) -> None:
        message = Message(content="Hi", sender=Sender.USER, status=MessageStatus.ERROR)

        with pytest.raises(ValueError):
            message.with_status(MessageStatus.SENT)


class TestUploadedFile:
    def test_rejects_negative_size(self) -> None:
        with pytest.raises(ValidationError):
            UploadedFile(name="a.pdf", size=-1, mime_type="application/pdf")


class TestGenerateContentResponse:
    def test_text_of_first_candidate(self) -> None:
        envelope = GenerateContentResponse.model_validate(
            {
                "candidates": [
                    {"content": {"parts": [{"text": "first"}, {"text": "second"}]}},
                    {"content": {"parts": [{"text": "other"}]}},
                ],
                "usageMetadata": {"totalTokenCount": 5},
            }
        )

        assert envelope.text == "first"

    def test_rejects_empty_candidates(self) -> None:
        with pytest.raises(ValidationError):
            GenerateContentResponse.model_validate({"candidates": []})
