from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from docintake.classification.document_types import DocumentType
from docintake.extraction.records import StructuredRecord
from docintake.pdf.text_extractor import ProgressSink, discard_progress
from docintake.processor.models import UploadedFile


@dataclass(slots=True)
class PipelineContext:
    upload: UploadedFile
    progress: ProgressSink = discard_progress
    extracted_text: str = ""
    document_type: DocumentType | None = None
    extracted_data: StructuredRecord = field(default_factory=dict)
    confidence: float = 0.0


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
