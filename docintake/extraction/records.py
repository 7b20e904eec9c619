from docintake.classification.document_types import (
    CONTRACT,
    FORM,
    ID_DOCUMENT,
    INVOICE,
    RECEIPT,
)

StructuredRecord = dict[str, str]

FIELD_KEYS: dict[str, tuple[str, ...]] = {
    INVOICE.name: ("Invoice Number", "Date", "Amount", "Vendor", "Status"),
    RECEIPT.name: ("Receipt Number", "Date", "Total", "Payment Method", "Store"),
    CONTRACT.name: ("Contract ID", "Parties", "Start Date", "Duration", "Value"),
    ID_DOCUMENT.name: (
        "Document Type",
        "ID Number",
        "Issue Date",
        "Expiry Date",
        "Nationality",
    ),
    FORM.name: ("Document Type", "Extracted Text"),
}

TEXT_PREVIEW_CHARS = 200
ELLIPSIS = "..."
DEFAULT_ISSUE_DATE = "2020-01-01"
DEFAULT_EXPIRY_DATE = "2030-01-01"


def text_preview(text: str | None) -> str:
    """First 200 characters of the text followed by an ellipsis."""
    return (text or "")[:TEXT_PREVIEW_CHARS] + ELLIPSIS
