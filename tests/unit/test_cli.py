from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from docintake.cli.app import app

runner = CliRunner()

_ENV = {"CHAT_PROVIDER": "example", "PACING_DELAY_SECONDS": "0", "PDF_ENGINE": "pdfplumber"}


@pytest.fixture()
def invoice_path(tmp_path: Path, invoice_pdf_bytes: bytes) -> Path:
    path = tmp_path / "invoice.pdf"
    path.write_bytes(invoice_pdf_bytes)
    return path


class TestProcessCommand:
    def test_renders_extracted_fields(self, invoice_path: Path) -> None:
        with patch("docintake.cli.app.Log"):
            result = runner.invoke(app, ["process", str(invoice_path)], env=_ENV)

        assert result.exit_code == 0, result.output
        assert "Processed documents" in result.output
        assert "INV-42" in result.output

    def test_answers_question_with_configured_client(self, invoice_path: Path) -> None:
        with patch("docintake.cli.app.Log"):
            result = runner.invoke(
                app, ["process", str(invoice_path), "--ask", "What is the total?"], env=_ENV
            )

        assert result.exit_code == 0, result.output
        assert "offline example reply" in result.output

    def test_exits_non_zero_when_nothing_processed(self, tmp_path: Path) -> None:
        with patch("docintake.cli.app.Log"):
            result = runner.invoke(app, ["process", str(tmp_path / "missing.pdf")], env=_ENV)

        assert result.exit_code == 1
        assert "No documents were processed" in result.output
