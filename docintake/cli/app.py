"""Command-line surface for the document intake pipeline."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from docintake.chat.factory import ChatClientFactory
from docintake.config.settings import Settings
from docintake.logging.logger import Log, suppress_substrings
from docintake.processor.file_loader import FileLoader
from docintake.processor.models import ProcessedDocument
from docintake.processor.processor import build_processor
from docintake.session.store import SessionStore
from docintake.worker.batch_worker import BatchWorker

app = typer.Typer(
    name="docintake",
    help="Classify PDF documents and extract their key fields",
    add_completion=False,
)
console = Console()


@app.callback()
def cli() -> None:
    """Document intake tools."""


def _render_documents(documents: list[ProcessedDocument]) -> None:
    table = Table(title="Processed documents")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Size", justify="right")
    table.add_column("Confidence", justify="right")
    table.add_column("Time", justify="right")
    for doc in documents:
        table.add_row(
            doc.name,
            f"{doc.document_type.icon} {doc.type}",
            doc.size,
            f"{doc.confidence:.0%}",
            doc.processing_time_label,
        )
    console.print(table)

    for doc in documents:
        fields = Table(title=f"{doc.name} ({doc.type})", show_header=False)
        fields.add_column("Field", style="bold")
        fields.add_column("Value")
        for key, value in doc.extracted_data.items():
            fields.add_row(key, value)
        console.print(fields)


@app.command()
def process(
    files: list[Path] = typer.Argument(..., help="PDF files to process"),
    ask: Optional[str] = typer.Option(
        None, "--ask", "-a", help="Question about the last processed document"
    ),
) -> None:
    """Process PDF files and optionally ask a question about the last one."""
    settings = Settings()
    Log.configure(
        settings.log_level,
        suppress=suppress_substrings(settings.log_suppressed_substrings),
    )

    loader = FileLoader()
    uploads = []
    for path in files:
        try:
            uploads.append(loader.load(path))
        except FileNotFoundError as exc:
            console.print(f"[red]✗ {exc}[/red]")

    store = SessionStore()
    worker = BatchWorker(build_processor(settings), store, settings)
    with console.status("Processing..."):
        documents = worker.run(uploads)

    if not documents:
        console.print("[yellow]No documents were processed[/yellow]")
        raise typer.Exit(code=1)
    _render_documents(documents)

    if ask:
        assistant = ChatClientFactory.create(settings)
        message = assistant.ask(store, ask)
        if message is not None:
            console.print(f"[bold blue]Assistant:[/bold blue] {message.content}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
