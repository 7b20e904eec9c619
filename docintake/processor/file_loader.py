import mimetypes
from pathlib import Path

from docintake.processor.models import UploadedFile

_FALLBACK_MIME_TYPE = "application/octet-stream"


class FileLoader:
    """Reads a file from disk into an UploadedFile."""

    def load(self, path: Path) -> UploadedFile:
        """Read file bytes and guess the MIME type from the extension.

        Raises:
            FileNotFoundError: if the file does not exist.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        content = path.read_bytes()
        mime_type, _ = mimetypes.guess_type(path.name)
        return UploadedFile(
            name=path.name,
            mime_type=mime_type or _FALLBACK_MIME_TYPE,
            size_bytes=len(content),
            content=content,
        )
