from dataclasses import replace

from docintake.logging.logger import Log
from docintake.processor.models import ProcessedDocument
from docintake.session.models import ChatMessage, SessionState


class SessionStore:
    """Single owner of the session state.

    Every operation builds a new SessionState and swaps it in; readers only
    ever see whole values.
    """

    def __init__(self, state: SessionState | None = None) -> None:
        self._state = state or SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    def _replace(self, **changes: object) -> SessionState:
        self._state = replace(self._state, **changes)  # type: ignore[arg-type]
        return self._state

    def add_document(self, document: ProcessedDocument) -> SessionState:
        """Prepend the document, select it and start a fresh chat."""
        return self._replace(
            documents=(document, *self._state.documents),
            selected_id=document.id,
            chat_messages=(),
        )

    def select(self, document_id: str) -> SessionState:
        """Select a document and clear the chat transcript.

        Raises:
            KeyError: if no document has that id.
        """
        if not any(d.id == document_id for d in self._state.documents):
            raise KeyError(f"Document not found: {document_id}")
        return self._replace(selected_id=document_id, chat_messages=())

    def clear_selection(self) -> SessionState:
        return self._replace(selected_id=None, chat_messages=())

    def delete(self, document_id: str) -> SessionState:
        """Remove a document and release its preview.

        Unknown ids are ignored.
        """
        target = next((d for d in self._state.documents if d.id == document_id), None)
        if target is None:
            Log.warning(f"Delete requested for unknown document {document_id}")
            return self._state
        target.preview.release()
        remaining = tuple(d for d in self._state.documents if d.id != document_id)
        if self._state.selected_id == document_id:
            return self._replace(documents=remaining, selected_id=None, chat_messages=())
        return self._replace(documents=remaining)

    def append_chat(self, message: ChatMessage) -> SessionState:
        return self._replace(chat_messages=(*self._state.chat_messages, message))

    def clear_chat(self) -> SessionState:
        return self._replace(chat_messages=())

    def set_progress(self, text: str) -> SessionState:
        return self._replace(progress_text=text)

    def set_processing(self, processing: bool) -> SessionState:
        return self._replace(processing=processing)
