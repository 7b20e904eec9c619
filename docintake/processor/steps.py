from docintake.classification.classifier import TypeClassifier
from docintake.extraction.confidence import score_confidence
from docintake.extraction.field_extractor import FieldExtractor
from docintake.logging.logger import Log
from docintake.pdf.text_extractor import TextExtractor
from docintake.processor.pipeline import PipelineContext, PipelineStep


class ExtractTextStep(PipelineStep):
    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted_text = self._text_extractor.extract(
            context.upload.content, context.progress
        )
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from {context.upload.name}"
        )
        return context


class ClassifyStep(PipelineStep):
    def __init__(self, classifier: TypeClassifier) -> None:
        self._classifier = classifier

    def run(self, context: PipelineContext) -> PipelineContext:
        context.document_type = self._classifier.classify(context.extracted_text)
        Log.info(f"Classified {context.upload.name} as {context.document_type.name}")
        return context


class ExtractFieldsStep(PipelineStep):
    def __init__(self, field_extractor: FieldExtractor) -> None:
        self._field_extractor = field_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document_type is None:
            raise ValueError("PipelineContext.document_type must be set before field extraction")
        context.extracted_data = self._field_extractor.extract_fields(
            context.extracted_text, context.document_type
        )
        Log.info(
            f"Extracted {len(context.extracted_data)} fields from {context.upload.name}"
        )
        return context


class ScoreConfidenceStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.confidence = score_confidence(context.extracted_text)
        return context
