"""Example chat client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseChatClient and register the provider in ChatClientFactory.
"""

from typing import ClassVar

from docintake.chat.client_base import BaseChatClient


class ExampleClientAdapter(BaseChatClient):
    """Example adapter that returns a fixed reply. No network calls."""

    DEFAULT_REPLY: ClassVar[str] = (
        "This is an offline example reply. Set CHAT_PROVIDER to use a real model."
    )

    def generate(
        self,
        *,
        prompt: str,
        max_new_tokens: int,
        temperature: float,
    ) -> str:
        _ = prompt, max_new_tokens, temperature
        return self.DEFAULT_REPLY
