"""Question answering over the selected document via a remote model."""

import random
from pathlib import Path
from typing import ClassVar

from docintake.chat.client_base import BaseChatClient
from docintake.chat.exceptions import ChatError
from docintake.chat.prompt_loader import load_prompt_template
from docintake.logging.logger import Log
from docintake.processor.models import ProcessedDocument
from docintake.session.models import ChatMessage
from docintake.session.store import SessionStore


class ChatAssistant:
    """Forwards one question at a time to a chat client.

    Any client failure is replaced by a fixed fallback reply so the
    conversation can continue.
    """

    FALLBACK_TEMPLATES: ClassVar[tuple[str, ...]] = (
        "Based on the document, I can see this is a {type}. How can I help you with it?",
        "I've analyzed your {type}. What specific information would you like to know?",
        "This appears to be a {type} document. What would you like me to explain?",
    )
    FALLBACK_NOTE: ClassVar[str] = " (Note: AI service temporarily unavailable)"

    def __init__(
        self,
        *,
        client: BaseChatClient,
        max_new_tokens: int = 500,
        temperature: float = 0.7,
        prompt_template_path: Path | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._client = client
        self._max_new_tokens = max_new_tokens
        self._temperature = temperature
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._rng = rng or random.Random()

    def ask(self, store: SessionStore, question: str) -> ChatMessage | None:
        """Append the question and the reply to the session transcript.

        Returns the assistant message, or None when the question is blank or
        no document is selected.
        """
        document = store.state.selected_document
        if not question.strip() or document is None:
            return None

        store.append_chat(ChatMessage(role="user", content=question))
        reply = self.reply(document, question)
        message = ChatMessage(role="assistant", content=reply)
        store.append_chat(message)
        return message

    def reply(self, document: ProcessedDocument, question: str) -> str:
        prompt = self.build_prompt(document, question)
        Log.debug(f"Chat prompt:\n{prompt}")
        try:
            return self._client.generate(
                prompt=prompt,
                max_new_tokens=self._max_new_tokens,
                temperature=self._temperature,
            )
        except ChatError as exc:
            Log.error(f"AI chat error: {exc}")
            return self._fallback(document)

    def build_prompt(self, document: ProcessedDocument, question: str) -> str:
        extracted = "\n".join(f"{k}: {v}" for k, v in document.extracted_data.items())
        return self._prompt_template.format(
            document_name=document.name,
            document_type=document.type,
            extracted_data=extracted,
            raw_text=document.raw_text,
            question=question,
        ).rstrip("\n")

    def _fallback(self, document: ProcessedDocument) -> str:
        template = self._rng.choice(self.FALLBACK_TEMPLATES)
        return template.format(type=document.type) + self.FALLBACK_NOTE
