"""Fail-closed PDF text extraction.

Turns the per-page tokens produced by a backend adapter into one text blob.
Failures never propagate: the caller always gets a string back, either the
extracted text, the scanned-document sentinel, or an ``Error: ...`` marker.
"""

from collections.abc import Callable

from docintake.logging.logger import Log
from docintake.pdf.base import BasePdfExtractor

ProgressSink = Callable[[str], None]

NO_TEXT_SENTINEL = "No text found - this might be a scanned PDF that requires OCR"
ERROR_PREFIX = "Error: "
PAGE_SEPARATOR = "\n\n"


def discard_progress(_message: str) -> None:
    return None


class TextExtractor:
    """Concatenates page text from a PDF adapter into a single string."""

    def __init__(self, adapter: BasePdfExtractor) -> None:
        self._adapter = adapter

    def extract(self, pdf_bytes: bytes, progress: ProgressSink | None = None) -> str:
        """Extract the text of every page, in order.

        Args:
            pdf_bytes: Raw PDF file content.
            progress: Optional sink for human-readable progress strings.

        Returns:
            The trimmed text, ``NO_TEXT_SENTINEL`` when no page has text, or
            ``"Error: <message>"`` when the PDF could not be read.
        """
        report = progress or discard_progress
        try:
            self._report(report, "Loading PDF...")
            self._report(report, "Parsing PDF structure...")
            parts: list[str] = []
            for page in self._adapter.iter_pages(pdf_bytes):
                self._report(report, f"Processing page {page.number} of {page.total}...")
                page_text = " ".join(t for t in page.tokens if t.strip())
                if page_text.strip():
                    parts.append(page_text + PAGE_SEPARATOR)
            self._report(report, "Text extraction complete!")
        except Exception as exc:
            Log.error(f"PDF extraction error: {exc}")
            self._report(report, "PDF extraction failed")
            return f"{ERROR_PREFIX}{exc}"

        text = "".join(parts).strip()
        if not text:
            Log.warning("PDF contains no extractable text")
            return NO_TEXT_SENTINEL
        return text

    @staticmethod
    def _report(sink: ProgressSink, message: str) -> None:
        try:
            sink(message)
        except Exception as exc:
            Log.warning(f"Progress sink failed: {exc}")
