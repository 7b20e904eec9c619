import io
import random
from datetime import datetime, timezone

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

FIXED_NOW = datetime(2024, 3, 15, 12, 0, 0, tzinfo=timezone.utc)


class FixedRandom(random.Random):
    """Random source whose ``random()`` always returns the same value."""

    def __init__(self, value: float = 0.5) -> None:
        super().__init__(0)
        self._value = value

    def random(self) -> float:
        return self._value


def _pdf(*pages: str) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for text in pages:
        if text:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf("Hello PDF World")


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _pdf("Page one content", "Page two content")


@pytest.fixture()
def gap_pdf_bytes() -> bytes:
    """Three pages, the middle one blank."""
    return _pdf("First page", "", "Third page")


@pytest.fixture()
def blank_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank pages)."""
    return _pdf("", "")


@pytest.fixture()
def invoice_pdf_bytes() -> bytes:
    return _pdf("Invoice #INV-42 Amount Due: $99.00 from Acme Co")


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def fixed_random() -> FixedRandom:
    return FixedRandom(0.5)
