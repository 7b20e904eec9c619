from docintake.processor.exceptions import FileTooLargeError, UnsupportedFileTypeError
from docintake.processor.models import UploadedFile


class UploadPolicy:
    """Caller-side gate applied before a file enters the pipeline."""

    def __init__(self, allowed_mime_type: str, max_file_size_bytes: int) -> None:
        self._allowed_mime_type = allowed_mime_type
        self._max_file_size_bytes = max_file_size_bytes

    def check(self, upload: UploadedFile) -> None:
        """Validate MIME type and size.

        Raises:
            UnsupportedFileTypeError: if the MIME type is not the allowed one.
            FileTooLargeError: if the file exceeds the size ceiling.
        """
        if upload.mime_type != self._allowed_mime_type:
            raise UnsupportedFileTypeError(f"Invalid file type: {upload.name} (PDF only)")
        if upload.size_bytes > self._max_file_size_bytes:
            limit_mb = self._max_file_size_bytes // (1024 * 1024)
            raise FileTooLargeError(f"File too large: {upload.name} (Max {limit_mb}MB)")
