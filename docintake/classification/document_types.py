from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentType:
    """One of the fixed document categories, with its display metadata."""

    name: str
    icon: str
    color: str  # gradient style token
    bg: str  # background style token


INVOICE = DocumentType("Invoice", "📄", "from-blue-500 to-blue-600", "bg-blue-500/10")
RECEIPT = DocumentType("Receipt", "🧾", "from-green-500 to-green-600", "bg-green-500/10")
CONTRACT = DocumentType(
    "Contract", "📋", "from-purple-500 to-purple-600", "bg-purple-500/10"
)
ID_DOCUMENT = DocumentType(
    "ID Document", "🪪", "from-orange-500 to-orange-600", "bg-orange-500/10"
)
FORM = DocumentType("Form", "📝", "from-pink-500 to-pink-600", "bg-pink-500/10")

DOCUMENT_TYPES: tuple[DocumentType, ...] = (INVOICE, RECEIPT, CONTRACT, ID_DOCUMENT, FORM)

_BY_NAME = {doc_type.name: doc_type for doc_type in DOCUMENT_TYPES}


def document_type_by_name(name: str) -> DocumentType:
    """Look up a document type by its display name.

    Raises:
        KeyError: if the name is not one of the fixed types.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(
            f"Unknown document type '{name}'. Choose from: {list(_BY_NAME)}"
        ) from None
