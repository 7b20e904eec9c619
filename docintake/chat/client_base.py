from abc import ABC, abstractmethod


class BaseChatClient(ABC):
    """Contract for provider-specific text-generation clients."""

    @abstractmethod
    def generate(
        self,
        *,
        prompt: str,
        max_new_tokens: int,
        temperature: float,
    ) -> str:
        """Return the generated reply as plain text.

        Raises:
            ChatError: on transport failures or unusable responses.
        """
