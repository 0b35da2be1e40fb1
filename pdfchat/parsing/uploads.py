"""Pending PDF attachments for the next outgoing message.

Handles file validation, parsing, and the ordered set of attachments that
the turn orchestrator consumes when a message is sent.
"""

import asyncio
import logging
import threading

from pdfchat.models.schemas import UploadedFile
from pdfchat.parsing.pdf_parser import PDFParseError, TextExtractor, count_pages

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MIME_TYPE = "application/pdf"

REASON_UNSUPPORTED_TYPE = "unsupported type"
REASON_TOO_LARGE = "too large"


class UploadValidationError(Exception):
    """Raised when a selected file is rejected before parsing.

    Attributes:
        reason: ``unsupported type`` or ``too large``.
    """

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason


def add_pending(
    files: tuple[UploadedFile, ...], uploaded: UploadedFile
) -> tuple[UploadedFile, ...]:
    return (*files, uploaded)


def remove_pending(
    files: tuple[UploadedFile, ...], file_id: str
) -> tuple[UploadedFile, ...]:
    return tuple(f for f in files if f.id != file_id)


class UploadManager:
    """Validates, parses and holds pending attachments."""

    def __init__(self, extractor: TextExtractor, max_file_size: int = MAX_FILE_SIZE) -> None:
        self._extractor = extractor
        self._max_file_size = max_file_size
        self._pending: tuple[UploadedFile, ...] = ()
        self._lock = threading.Lock()

    @property
    def is_available(self) -> bool:
        """Whether uploads can currently be parsed."""
        return self._extractor.is_available

    def _validate(self, size: int, mime_type: str) -> None:
        if mime_type != PDF_MIME_TYPE:
            raise UploadValidationError(REASON_UNSUPPORTED_TYPE, "Please upload only PDF files")

        if size > self._max_file_size:
            limit_mb = self._max_file_size // (1024 * 1024)
            raise UploadValidationError(
                REASON_TOO_LARGE, f"File size must be less than {limit_mb}MB"
            )

    async def add_file(self, data: bytes, name: str, mime_type: str) -> UploadedFile:
        """Validate and parse a file, then add it to the pending set.

        Args:
            data: Raw file bytes.
            name: Original filename.
            mime_type: MIME type reported by the file picker.

        Returns:
            The new pending attachment.

        Raises:
            UploadValidationError: Wrong type or over the size limit.
            PDFParseError: The document could not be parsed.
        """
        try:
            self._validate(len(data), mime_type)
        except UploadValidationError as e:
            logger.warning(f"Rejected upload {name}: {e.reason}")
            raise

        # Parsing is CPU bound; keep it off the event loop
        try:
            extracted_text = await asyncio.to_thread(self._extractor.extract_text, data)
        except PDFParseError as e:
            logger.warning(f"Could not parse {name}: {e}")
            raise

        uploaded = UploadedFile(
            name=name,
            size=len(data),
            mime_type=mime_type,
            extracted_text=extracted_text,
        )
        with self._lock:
            self._pending = add_pending(self._pending, uploaded)

        logger.info(f"Attached {name} ({count_pages(extracted_text)} pages)")
        return uploaded

    def remove_file(self, file_id: str) -> None:
        with self._lock:
            self._pending = remove_pending(self._pending, file_id)

    def clear_all(self) -> None:
        with self._lock:
            self._pending = ()

    def list_pending(self) -> tuple[UploadedFile, ...]:
        return self._pending
