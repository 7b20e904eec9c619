class PreviewHandle:
    """In-memory view over an uploaded file's bytes.

    Owned by exactly one ProcessedDocument and released when that document
    is deleted from the session.
    """

    def __init__(self, content: bytes) -> None:
        self._view = memoryview(content)
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    @property
    def view(self) -> memoryview:
        """The underlying bytes.

        Raises:
            ValueError: if the handle has been released.
        """
        if self._released:
            raise ValueError("Preview has been released")
        return self._view

    def release(self) -> None:
        """Release the view. Safe to call more than once."""
        if not self._released:
            self._view.release()
            self._released = True
