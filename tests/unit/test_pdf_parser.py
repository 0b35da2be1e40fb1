"""Unit tests for the PDF text extractor."""

import pytest
import pytest_check as check

from pdfchat.parsing.pdf_parser import PDFParseError, TextExtractor, count_pages


class FakeDocument:
    """Document whose pages are given as item lists; ``None`` fails."""

    def __init__(self, pages: list[list[str] | None]) -> None:
        self.pages = pages
        self.visited: list[int] = []

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def page_text_items(self, page_number: int) -> list[str]:
        self.visited.append(page_number)
        items = self.pages[page_number - 1]
        if items is None:
            raise RuntimeError("bad content stream")
        return items


class FakeBackend:
    def __init__(self, document: FakeDocument) -> None:
        self.document = document

    def open(self, data: bytes) -> FakeDocument:
        return self.document


class TestExtractTextValid:
    """Tests for successful extraction."""

    def test_extracts_page_labelled_text(self, extractor: TextExtractor, sample_pdf_bytes: bytes) -> None:
        """Real PDF text is returned with a label per page."""
        text = extractor.extract_text(sample_pdf_bytes)

        check.is_true(text.startswith("Page 1:\n"))
        check.is_in("Hello", text)
        check.is_in("Page 2:\n", text)
        check.is_in("Second", text)
        check.less(text.index("Page 1:"), text.index("Page 2:"))

    def test_joins_items_with_spaces_in_page_order(self) -> None:
        """Items are space-joined and pages concatenated with blank lines."""
        document = FakeDocument([["Hello", "World"], ["Second", "page"]])
        extractor = TextExtractor(FakeBackend(document))

        text = extractor.extract_text(b"%PDF-1.4 fake")

        check.equal(text, "Page 1:\nHello World\n\nPage 2:\nSecond page\n\n")
        check.equal(document.visited, [1, 2])

    def test_empty_page_keeps_its_label(self) -> None:
        """A page without text still contributes its label."""
        extractor = TextExtractor(FakeBackend(FakeDocument([[]])))

        check.equal(extractor.extract_text(b"%PDF-1.4"), "Page 1:\n\n\n")


class TestExtractTextRejection:
    """Tests for extraction failures."""

    def test_unavailable_without_backend(self, sample_pdf_bytes: bytes) -> None:
        """Extractor without a backend reports unavailable and refuses to parse."""
        extractor = TextExtractor()

        assert extractor.is_available is False
        with pytest.raises(PDFParseError, match="not loaded"):
            extractor.extract_text(sample_pdf_bytes)

    def test_attach_backend_makes_available(self) -> None:
        extractor = TextExtractor()
        extractor.attach_backend(FakeBackend(FakeDocument([["x"]])))

        assert extractor.is_available is True

    def test_rejects_empty_bytes(self, extractor: TextExtractor) -> None:
        """Empty bytes raises PDFParseError."""
        with pytest.raises(PDFParseError, match="Empty file"):
            extractor.extract_text(b"")

    def test_rejects_non_pdf_file(self, extractor: TextExtractor) -> None:
        """Non-PDF content raises PDFParseError."""
        with pytest.raises(PDFParseError, match="Invalid PDF"):
            extractor.extract_text(b"This is a plain text file, not a PDF.")

    def test_rejects_truncated_pdf(self, extractor: TextExtractor) -> None:
        """Truncated PDF raises PDFParseError."""
        with pytest.raises(PDFParseError):
            extractor.extract_text(b"%PDF-1.4\n1 0 obj\n<<")

    def test_rejects_document_without_pages(self) -> None:
        extractor = TextExtractor(FakeBackend(FakeDocument([])))

        with pytest.raises(PDFParseError, match="no pages"):
            extractor.extract_text(b"%PDF-1.4")

    def test_page_failure_discards_earlier_pages(self) -> None:
        """A failing page aborts extraction; nothing partial is returned."""
        document = FakeDocument([["first"], None, ["third"]])
        extractor = TextExtractor(FakeBackend(document))

        with pytest.raises(PDFParseError, match="page 2"):
            extractor.extract_text(b"%PDF-1.4")

        check.equal(document.visited, [1, 2])


def test_count_pages_of_extracted_text() -> None:
    extractor = TextExtractor(FakeBackend(FakeDocument([["a"], [], ["Page 9: b"]])))

    assert count_pages(extractor.extract_text(b"%PDF-1.4")) == 3
