from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class PageTokens:
    """Text tokens found on a single page, in reading order."""

    number: int  # 1-based
    total: int
    tokens: list[str]


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def iter_pages(self, pdf_bytes: bytes) -> Iterator[PageTokens]:
        """Yield the text tokens of every page, page 1 first.

        Args:
            pdf_bytes: Raw PDF file content.

        Yields:
            PageTokens for each page of the document.

        Raises:
            PdfExtractionError: if the document cannot be parsed or has no pages.
        """
