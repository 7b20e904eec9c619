import random
import time
from collections.abc import Callable, Sequence
from datetime import datetime

from docintake.classification.classifier import TypeClassifier
from docintake.config.settings import Settings
from docintake.extraction.field_extractor import FieldExtractor
from docintake.extraction.synthetic import SyntheticValues
from docintake.logging.logger import Log
from docintake.pdf.factory import PdfExtractorFactory
from docintake.pdf.text_extractor import ProgressSink, TextExtractor
from docintake.processor.models import ProcessedDocument, UploadedFile
from docintake.processor.pipeline import PipelineContext, PipelineStep
from docintake.processor.steps import (
    ClassifyStep,
    ExtractFieldsStep,
    ExtractTextStep,
    ScoreConfidenceStep,
)
from docintake.session.preview import PreviewHandle


class Processor:
    """Runs one uploaded file through the pipeline steps.

    Pipeline: extract text -> classify -> extract fields -> score confidence.
    """

    def __init__(
        self,
        steps: Sequence[PipelineStep],
        *,
        raw_text_preview_chars: int = 2000,
        rng: random.Random | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._steps = list(steps)
        self._raw_text_preview_chars = raw_text_preview_chars
        self._rng = rng or random.Random()
        self._now = now or datetime.now
        self._issued_ids: set[str] = set()

    def process(
        self,
        upload: UploadedFile,
        progress: ProgressSink | None = None,
    ) -> ProcessedDocument:
        """Run every step for ``upload`` and assemble the ProcessedDocument."""
        Log.info(f"Processing {upload.name} ({upload.size_bytes} bytes)")
        preview = PreviewHandle(upload.content)
        started = time.perf_counter()
        context = PipelineContext(upload=upload)
        if progress is not None:
            context.progress = progress

        try:
            for step in self._steps:
                context = step.run(context)
        except Exception:
            preview.release()
            raise

        if context.document_type is None:
            preview.release()
            raise ValueError("Pipeline finished without a document type")

        elapsed = time.perf_counter() - started
        return ProcessedDocument(
            id=self._new_document_id(),
            name=upload.name,
            size_bytes=upload.size_bytes,
            upload_date=self._now().date().isoformat(),
            document_type=context.document_type,
            confidence=context.confidence,
            extracted_data=dict(context.extracted_data),
            raw_text=context.extracted_text[: self._raw_text_preview_chars],
            full_text=context.extracted_text,
            processing_time=elapsed,
            preview=preview,
        )

    def _new_document_id(self) -> str:
        millis = int(self._now().timestamp() * 1000)
        while True:
            document_id = f"{millis}-{self._rng.getrandbits(32):08x}"
            if document_id not in self._issued_ids:
                self._issued_ids.add(document_id)
                return document_id


def build_processor(
    settings: Settings,
    rng: random.Random | None = None,
    now: Callable[[], datetime] | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    rng = rng or random.Random()
    text_extractor = TextExtractor(PdfExtractorFactory.create(settings))
    classifier = TypeClassifier(rng=rng)
    field_extractor = FieldExtractor(SyntheticValues(rng=rng, now=now))
    steps: list[PipelineStep] = [
        ExtractTextStep(text_extractor=text_extractor),
        ClassifyStep(classifier=classifier),
        ExtractFieldsStep(field_extractor=field_extractor),
        ScoreConfidenceStep(),
    ]
    return Processor(
        steps=steps,
        raw_text_preview_chars=settings.raw_text_preview_chars,
        rng=rng,
        now=now,
    )
