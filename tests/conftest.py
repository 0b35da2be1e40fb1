"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - make_pdf: Builds small text PDFs in memory
    - sample_pdf_bytes: Two-page PDF with known text
    - chat_config: Gateway configuration with a dummy API key
    - extractor: TextExtractor backed by pypdf
    - async_client: HTTPX client for the host application
"""

from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from pdfchat.api import app
from pdfchat.gateway.config import ChatConfig
from pdfchat.parsing.pdf_parser import PypdfBackend, TextExtractor


def build_pdf(pages: list[str]) -> bytes:
    """Build a minimal PDF with one line of Helvetica text per page.

    Args:
        pages: Text of each page; must not contain parentheses.

    Returns:
        Raw PDF bytes with a valid cross-reference table.
    """
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for page_id, text in zip(page_ids, pages, strict=True):
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {page_id + 1} 0 R >>"
            ).encode()
        )
        stream = f"BT /F1 24 Tf 72 720 Td ({text}) Tj ET".encode()
        objects.append(
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    return bytes(out)


@pytest.fixture
def make_pdf() -> Callable[[list[str]], bytes]:
    return build_pdf


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """Two-page PDF whose pages read ``Hello World`` and ``Second page``."""
    return build_pdf(["Hello World", "Second page"])


@pytest.fixture
def chat_config() -> ChatConfig:
    return ChatConfig(
        api_key="test-key-12345",
        api_base_url="https://example.test/v1beta",
        model_name="gemini-2.0-flash",
    )


@pytest.fixture
def extractor() -> TextExtractor:
    return TextExtractor(PypdfBackend())


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the host application.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
