from collections.abc import Iterator

import pymupdf

from docintake.pdf.base import BasePdfExtractor, PageTokens
from docintake.pdf.exceptions import PdfExtractionError

# Index of the word string in a PyMuPDF "words" tuple:
# (x0, y0, x1, y1, word, block_no, line_no, word_no)
_WORD_INDEX = 4


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts page tokens from PDF using PyMuPDF."""

    def iter_pages(self, pdf_bytes: bytes) -> Iterator[PageTokens]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                total = doc.page_count
                if total == 0:
                    raise PdfExtractionError("PDF has no pages")
                for number, page in enumerate(doc, start=1):
                    words = page.get_text("words")
                    yield PageTokens(
                        number=number,
                        total=total,
                        tokens=[word[_WORD_INDEX] for word in words],
                    )
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
