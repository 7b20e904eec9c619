import random
from datetime import datetime
from unittest.mock import MagicMock, patch

import pytest

from docintake.classification.classifier import TypeClassifier
from docintake.classification.document_types import INVOICE
from docintake.config.settings import Settings
from docintake.extraction.field_extractor import FieldExtractor
from docintake.extraction.synthetic import SyntheticValues
from docintake.pdf.text_extractor import TextExtractor
from docintake.processor.models import UploadedFile
from docintake.processor.pipeline import PipelineContext, PipelineStep
from docintake.processor.processor import Processor, build_processor
from docintake.processor.steps import (
    ClassifyStep,
    ExtractFieldsStep,
    ExtractTextStep,
    ScoreConfidenceStep,
)

INVOICE_TEXT = "Invoice #INV-9981 dated 03/15/2024 Amount Due: $1,250.00 from Acme Co"


def _upload(content: bytes = b"%PDF-fake") -> UploadedFile:
    return UploadedFile(
        name="invoice.pdf",
        mime_type="application/pdf",
        size_bytes=2048,
        content=content,
    )


def _make_processor(
    extracted_text: str,
    now: datetime,
    raw_text_preview_chars: int = 2000,
) -> tuple[Processor, MagicMock]:
    text_extractor = MagicMock(spec=TextExtractor)
    text_extractor.extract.return_value = extracted_text
    rng = random.Random(7)
    steps: list[PipelineStep] = [
        ExtractTextStep(text_extractor=text_extractor),
        ClassifyStep(classifier=TypeClassifier(rng=rng)),
        ExtractFieldsStep(
            field_extractor=FieldExtractor(SyntheticValues(rng=rng, now=lambda: now))
        ),
        ScoreConfidenceStep(),
    ]
    processor = Processor(
        steps,
        raw_text_preview_chars=raw_text_preview_chars,
        rng=rng,
        now=lambda: now,
    )
    return processor, text_extractor


class TestProcessorPipeline:
    def test_builds_processed_document(self, fixed_now: datetime) -> None:
        processor, text_extractor = _make_processor(INVOICE_TEXT, fixed_now)

        document = processor.process(_upload())

        text_extractor.extract.assert_called_once()
        assert text_extractor.extract.call_args.args[0] == b"%PDF-fake"
        assert document.name == "invoice.pdf"
        assert document.document_type is INVOICE
        assert document.type == "Invoice"
        assert document.extracted_data["Invoice Number"] == "INV-9981"
        assert document.confidence == 0.85
        assert document.full_text == INVOICE_TEXT
        assert document.total_characters == len(INVOICE_TEXT)
        assert document.upload_date == "2024-03-15"
        assert document.size == "2.00 KB"
        assert document.status == "processed"

    def test_truncates_raw_text_preview(self, fixed_now: datetime) -> None:
        text = "invoice " * 50
        processor, _ = _make_processor(text, fixed_now, raw_text_preview_chars=20)

        document = processor.process(_upload())

        assert document.raw_text == text[:20]
        assert document.full_text == text

    def test_passes_progress_sink_to_extractor(self, fixed_now: datetime) -> None:
        processor, text_extractor = _make_processor(INVOICE_TEXT, fixed_now)
        sink = MagicMock()

        processor.process(_upload(), progress=sink)

        assert text_extractor.extract.call_args.args[1] is sink

    def test_error_text_still_produces_document(self, fixed_now: datetime) -> None:
        processor, _ = _make_processor("Error: PDF has no pages", fixed_now)

        document = processor.process(_upload())

        assert document.full_text == "Error: PDF has no pages"
        assert document.confidence == 0.70

    def test_ids_are_unique_and_timestamped(self, fixed_now: datetime) -> None:
        processor, _ = _make_processor(INVOICE_TEXT, fixed_now)
        millis = int(fixed_now.timestamp() * 1000)

        ids = {processor.process(_upload()).id for _ in range(25)}

        assert len(ids) == 25
        assert all(i.startswith(f"{millis}-") for i in ids)

    def test_measures_processing_time(self, fixed_now: datetime) -> None:
        processor, _ = _make_processor(INVOICE_TEXT, fixed_now)

        with patch(
            "docintake.processor.processor.time.perf_counter", side_effect=[10.0, 11.5]
        ):
            document = processor.process(_upload())

        assert document.processing_time == 1.5
        assert document.processing_time_label == "1.5s"

    def test_preview_is_live_after_processing(self, fixed_now: datetime) -> None:
        processor, _ = _make_processor(INVOICE_TEXT, fixed_now)

        document = processor.process(_upload(b"%PDF-bytes"))

        assert not document.preview.released
        assert bytes(document.preview.view) == b"%PDF-bytes"


class TestProcessorFailures:
    def test_step_error_releases_preview_and_reraises(self) -> None:
        failing = MagicMock(spec=PipelineStep)
        failing.run.side_effect = RuntimeError("boom")
        processor = Processor([failing])

        with (
            patch("docintake.processor.processor.PreviewHandle") as preview_cls,
            pytest.raises(RuntimeError, match="boom"),
        ):
            processor.process(_upload())

        preview_cls.return_value.release.assert_called_once()

    def test_missing_document_type_raises(self) -> None:
        class _NoOp(PipelineStep):
            def run(self, context: PipelineContext) -> PipelineContext:
                return context

        with pytest.raises(ValueError, match="document type"):
            Processor([_NoOp()]).process(_upload())


class TestBuildProcessor:
    def test_runs_against_real_pdf(self, invoice_pdf_bytes: bytes) -> None:
        processor = build_processor(Settings(pdf_engine="pdfplumber"))
        upload = UploadedFile(
            name="invoice.pdf",
            mime_type="application/pdf",
            size_bytes=len(invoice_pdf_bytes),
            content=invoice_pdf_bytes,
        )

        document = processor.process(upload)

        assert document.type == "Invoice"
        assert document.extracted_data["Invoice Number"] == "INV-42"
        assert document.extracted_data["Amount"] == "$99.00"
        assert document.extracted_data["Vendor"] == "Acme Co"
