from dataclasses import dataclass

from docintake.processor.models import ProcessedDocument


@dataclass(frozen=True)
class ChatMessage:
    role: str  # "user" | "assistant"
    content: str


@dataclass(frozen=True)
class SessionState:
    """Everything the intake session holds in memory. Never mutated in place."""

    documents: tuple[ProcessedDocument, ...] = ()  # newest first
    selected_id: str | None = None
    chat_messages: tuple[ChatMessage, ...] = ()
    progress_text: str = ""
    processing: bool = False

    @property
    def selected_document(self) -> ProcessedDocument | None:
        if self.selected_id is None:
            return None
        return next((d for d in self.documents if d.id == self.selected_id), None)
