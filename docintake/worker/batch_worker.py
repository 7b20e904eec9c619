import time
from collections.abc import Sequence

from docintake.config.settings import Settings
from docintake.logging.logger import Log
from docintake.processor.exceptions import ProcessorError
from docintake.processor.models import ProcessedDocument, UploadedFile
from docintake.processor.processor import Processor
from docintake.processor.upload_policy import UploadPolicy
from docintake.session.store import SessionStore


class BatchWorker:
    """Processes a batch of uploads strictly one after another.

    Rejected or failing files are reported through the session progress text
    and never stop the rest of the batch.
    """

    def __init__(
        self,
        processor: Processor,
        store: SessionStore,
        settings: Settings,
    ) -> None:
        self._processor = processor
        self._store = store
        self._policy = UploadPolicy(
            allowed_mime_type=settings.allowed_mime_type,
            max_file_size_bytes=settings.max_file_size_bytes,
        )
        self._pacing_delay_seconds = settings.pacing_delay_seconds

    def run(self, uploads: Sequence[UploadedFile]) -> list[ProcessedDocument]:
        """Process every upload and return the documents added to the session."""
        if not uploads:
            return []
        processed: list[ProcessedDocument] = []
        self._store.set_processing(True)
        try:
            for index, upload in enumerate(uploads, start=1):
                self._store.set_progress(
                    f"Processing file {index} of {len(uploads)}: {upload.name}"
                )
                document = self._run_one(upload)
                if document is not None:
                    processed.append(document)
        finally:
            self._store.set_processing(False)
            self._store.set_progress("")
        return processed

    def _run_one(self, upload: UploadedFile) -> ProcessedDocument | None:
        try:
            self._policy.check(upload)
        except ProcessorError as exc:
            Log.warning(f"Rejected {upload.name}: {exc}")
            self._store.set_progress(f"✗ {exc}")
            return None

        try:
            document = self._processor.process(upload, progress=self._store.set_progress)
        except Exception as exc:
            Log.error(f"Error processing {upload.name}: {exc}")
            self._store.set_progress(f"✗ Error processing {upload.name}")
            return None

        self._store.add_document(document)
        self._store.set_progress(
            f"✓ Completed {upload.name} in {document.processing_time_label}"
        )
        Log.info(f"Completed {upload.name} as {document.type}")
        time.sleep(self._pacing_delay_seconds)
        return document
