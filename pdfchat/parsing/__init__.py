"""PDF parsing and attachment handling.

Responsibilities:
    - PDF text extraction with pypdf, labelled per page
    - Upload validation (type and size) before any parsing
    - Ordered set of attachments pending the next message
"""

from pdfchat.parsing.pdf_parser import PDFParseError, PypdfBackend, TextExtractor
from pdfchat.parsing.uploads import UploadManager, UploadValidationError

__all__ = [
    "PDFParseError",
    "PypdfBackend",
    "TextExtractor",
    "UploadManager",
    "UploadValidationError",
]
