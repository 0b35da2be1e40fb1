"""PDF text extraction with a pluggable parsing backend.

The extractor starts without a backend and reports itself unavailable until
one is attached, so the UI can disable uploads while the parser loads.
"""

import io
import logging
import re
from typing import Protocol

from pypdf import PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

PDF_MAGIC_BYTES = b"%PDF"
PAGE_HEADER = re.compile(r"^Page \d+:$", re.MULTILINE)


class PDFParseError(Exception):
    """Raised when PDF parsing fails."""

    pass


class PdfDocument(Protocol):
    """An opened document that can enumerate per-page text."""

    @property
    def page_count(self) -> int: ...

    def page_text_items(self, page_number: int) -> list[str]:
        """Return the text items of a 1-based page in layout order."""
        ...


class PdfBackend(Protocol):
    """Capability that opens raw bytes as a document."""

    def open(self, data: bytes) -> PdfDocument: ...


class _PypdfDocument:
    def __init__(self, reader: PdfReader) -> None:
        self._reader = reader

    @property
    def page_count(self) -> int:
        return len(self._reader.pages)

    def page_text_items(self, page_number: int) -> list[str]:
        items: list[str] = []

        def visit(text: str, *_args: object) -> None:
            if text.strip():
                items.append(text.strip())

        self._reader.pages[page_number - 1].extract_text(visitor_text=visit)
        return items


class PypdfBackend:
    """Backend built on pypdf's ``PdfReader``."""

    def open(self, data: bytes) -> PdfDocument:
        return _PypdfDocument(PdfReader(io.BytesIO(data)))


def _validate_pdf_bytes(file_content: bytes) -> None:
    """Validate PDF file content before parsing.

    Args:
        file_content: Raw bytes of the PDF file.

    Raises:
        PDFParseError: If validation fails.
    """
    if not file_content:
        raise PDFParseError("Empty file provided")

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")


class TextExtractor:
    """Turns PDF bytes into page-labelled text.

    Extraction is all-or-nothing: a failure on any page discards the text
    gathered from earlier pages.
    """

    def __init__(self, backend: PdfBackend | None = None) -> None:
        self._backend = backend

    @property
    def is_available(self) -> bool:
        return self._backend is not None

    def attach_backend(self, backend: PdfBackend) -> None:
        self._backend = backend
        logger.info(f"PDF parser ready: {type(backend).__name__}")

    def extract_text(self, file_content: bytes) -> str:
        """Extract the text of every page.

        Args:
            file_content: Raw bytes of the PDF file.

        Returns:
            Concatenated ``Page N:`` blocks separated by blank lines.

        Raises:
            PDFParseError: If no backend is attached, or the file is empty,
                invalid, corrupt, or has an unreadable page.
        """
        if self._backend is None:
            raise PDFParseError("PDF parser is not loaded")

        _validate_pdf_bytes(file_content)

        try:
            document = self._backend.open(file_content)
        except PdfReadError as e:
            raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
        except Exception as e:
            raise PDFParseError(f"Failed to read PDF: {e}") from e

        try:
            pages = document.page_count
        except Exception as e:
            raise PDFParseError(f"Failed to read PDF: {e}") from e
        if pages == 0:
            raise PDFParseError("PDF contains no pages")

        text_parts: list[str] = []
        for page_number in range(1, pages + 1):
            try:
                page_text = " ".join(document.page_text_items(page_number))
            except Exception as e:
                raise PDFParseError(
                    f"Failed to extract text from page {page_number}: {e}"
                ) from e
            text_parts.append(f"Page {page_number}:\n{page_text}\n\n")

        text = "".join(text_parts)
        logger.debug(f"Extracted {len(text)} characters from {pages} pages")
        return text


def count_pages(extracted_text: str) -> int:
    """Number of ``Page N:`` blocks in text returned by ``extract_text``."""
    return len(PAGE_HEADER.findall(extracted_text))
