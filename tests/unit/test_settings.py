import pytest
from pydantic import ValidationError

from docintake.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        assert Settings().app_env == "dev"

    def test_default_pdf_engine(self) -> None:
        assert Settings().pdf_engine == "pdfplumber"

    def test_default_upload_limits(self) -> None:
        s = Settings()
        assert s.allowed_mime_type == "application/pdf"
        assert s.max_file_size_bytes == 50 * 1024 * 1024

    def test_default_pacing_delay(self) -> None:
        assert Settings().pacing_delay_seconds == 0.5

    def test_default_suppressed_substrings(self) -> None:
        assert Settings().log_suppressed_substrings == ["TT:", "font"]

    def test_default_chat_parameters(self) -> None:
        s = Settings()
        assert s.chat_max_new_tokens == 500
        assert s.chat_temperature == 0.7
        assert s.chat_payload_style == "inputs"


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "DEBUG"

    def test_loads_pdf_engine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PDF_ENGINE", "pymupdf")
        assert Settings().pdf_engine == "pymupdf"

    def test_loads_max_file_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_FILE_SIZE_BYTES", "1024")
        assert Settings().max_file_size_bytes == 1024

    def test_loads_suppressed_substrings_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_SUPPRESSED_SUBSTRINGS", '["glyph"]')
        assert Settings().log_suppressed_substrings == ["glyph"]


class TestSettingsValidation:
    def test_invalid_max_file_size_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_FILE_SIZE_BYTES", "fifty")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_pacing_delay_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PACING_DELAY_SECONDS", "soon")
        with pytest.raises(ValidationError):
            Settings()
