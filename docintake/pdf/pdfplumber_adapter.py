import io
from collections.abc import Iterator

import pdfplumber

from docintake.pdf.base import BasePdfExtractor, PageTokens
from docintake.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts page tokens from PDF using pdfplumber."""

    def iter_pages(self, pdf_bytes: bytes) -> Iterator[PageTokens]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                total = len(pdf.pages)
                if total == 0:
                    raise PdfExtractionError("PDF has no pages")
                for number, page in enumerate(pdf.pages, start=1):
                    words = page.extract_words()
                    yield PageTokens(
                        number=number,
                        total=total,
                        tokens=[word.get("text", "") for word in words],
                    )
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
