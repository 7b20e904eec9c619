from docintake.classification.document_types import (
    CONTRACT,
    ID_DOCUMENT,
    INVOICE,
    RECEIPT,
    DocumentType,
)
from docintake.extraction.records import (
    DEFAULT_EXPIRY_DATE,
    DEFAULT_ISSUE_DATE,
    StructuredRecord,
    text_preview,
)
from docintake.extraction.synthetic import SyntheticValues


def build_mock_record(
    doc_type: DocumentType,
    text: str | None,
    synthetic: SyntheticValues,
) -> StructuredRecord:
    """Fully fabricated record for text too short to probe."""
    if doc_type == INVOICE:
        return {
            "Invoice Number": synthetic.identifier("INV-"),
            "Date": synthetic.today(),
            "Amount": synthetic.amount(500, 5000),
            "Vendor": "Acme Corporation",
            "Status": "Processed",
        }
    if doc_type == RECEIPT:
        return {
            "Receipt Number": synthetic.identifier("RCP-"),
            "Date": synthetic.today(),
            "Total": synthetic.amount(50, 500),
            "Payment Method": "Credit Card",
            "Store": "Retail Store",
        }
    if doc_type == CONTRACT:
        return {
            "Contract ID": synthetic.identifier("CNT-"),
            "Parties": "Company A & Company B",
            "Start Date": synthetic.today(),
            "Duration": "12 months",
            "Value": synthetic.amount(10000, 50000),
        }
    if doc_type == ID_DOCUMENT:
        return {
            "Document Type": "ID Card",
            "ID Number": synthetic.identifier("ID"),
            "Issue Date": DEFAULT_ISSUE_DATE,
            "Expiry Date": DEFAULT_EXPIRY_DATE,
            "Nationality": "US",
        }
    return {
        "Document Type": doc_type.name,
        "Extracted Text": text_preview(text),
    }
