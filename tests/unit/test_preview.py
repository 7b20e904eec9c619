import pytest

from docintake.session.preview import PreviewHandle


class TestPreviewHandle:
    def test_exposes_bytes(self) -> None:
        handle = PreviewHandle(b"%PDF-1.4")
        assert bytes(handle.view) == b"%PDF-1.4"
        assert not handle.released

    def test_release_invalidates_view(self) -> None:
        handle = PreviewHandle(b"%PDF-1.4")
        handle.release()
        assert handle.released
        with pytest.raises(ValueError, match="released"):
            _ = handle.view

    def test_release_twice_is_safe(self) -> None:
        handle = PreviewHandle(b"data")
        handle.release()
        handle.release()
        assert handle.released
