import random
from typing import ClassVar

from docintake.classification.document_types import (
    CONTRACT,
    DOCUMENT_TYPES,
    FORM,
    ID_DOCUMENT,
    INVOICE,
    RECEIPT,
    DocumentType,
)
from docintake.logging.logger import Log

MIN_TEXT_LENGTH = 10


class TypeClassifier:
    """Keyword-based document type classifier.

    Rules are checked in a fixed priority order and the first rule with any
    keyword contained in the lower-cased text wins. Unusable or unmatched
    text falls back to a uniformly random type.
    """

    RULES: ClassVar[tuple[tuple[DocumentType, tuple[str, ...]], ...]] = (
        (INVOICE, ("invoice", "bill", "amount due")),
        (RECEIPT, ("receipt", "payment", "total")),
        (CONTRACT, ("contract", "agreement", "terms")),
        (ID_DOCUMENT, ("passport", "license", "id")),
        (FORM, ("form", "application", "submit")),
    )

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def classify(self, text: str | None) -> DocumentType:
        if not text or len(text) < MIN_TEXT_LENGTH:
            return self._random_type("text too short")

        lowered = text.lower()
        for doc_type, keywords in self.RULES:
            if any(keyword in lowered for keyword in keywords):
                Log.debug(f"Classified document as {doc_type.name}")
                return doc_type
        return self._random_type("no keyword matched")

    def _random_type(self, reason: str) -> DocumentType:
        doc_type = self._rng.choice(DOCUMENT_TYPES)
        Log.debug(f"Random document type {doc_type.name} ({reason})")
        return doc_type
