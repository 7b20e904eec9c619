from dataclasses import dataclass, field

from docintake.classification.document_types import DocumentType
from docintake.extraction.records import StructuredRecord
from docintake.session.preview import PreviewHandle


@dataclass(frozen=True)
class UploadedFile:
    """A file handed over by the file-selection surface."""

    name: str
    mime_type: str
    size_bytes: int
    content: bytes = field(repr=False)


@dataclass(frozen=True)
class ProcessedDocument:
    """Result of running one uploaded file through the pipeline."""

    id: str
    name: str
    size_bytes: int
    upload_date: str
    document_type: DocumentType
    confidence: float
    extracted_data: StructuredRecord
    raw_text: str
    full_text: str
    processing_time: float  # seconds
    preview: PreviewHandle = field(repr=False, compare=False)
    status: str = "processed"

    @property
    def type(self) -> str:
        return self.document_type.name

    @property
    def size(self) -> str:
        return f"{self.size_bytes / 1024:.2f} KB"

    @property
    def total_characters(self) -> int:
        return len(self.full_text)

    @property
    def processing_time_label(self) -> str:
        return f"{self.processing_time:.1f}s"
