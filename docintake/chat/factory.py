from docintake.chat.assistant import ChatAssistant
from docintake.chat.client_base import BaseChatClient
from docintake.chat.example_client_adapter import ExampleClientAdapter
from docintake.chat.huggingface_client_adapter import HuggingFaceClientAdapter
from docintake.chat.openai_client_adapter import OpenAIClientAdapter
from docintake.config.settings import Settings


class ChatClientFactory:
    """Creates the configured chat client and assistant."""

    PROVIDERS = ("huggingface", "openai", "openai_compatible", "example")

    @classmethod
    def create_client(cls, settings: Settings) -> BaseChatClient:
        provider = settings.chat_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "huggingface":
            return HuggingFaceClientAdapter(
                endpoint_url=settings.chat_endpoint_url,
                timeout_seconds=settings.chat_timeout_seconds,
                api_token=settings.chat_api_token,
                payload_style=settings.chat_payload_style.lower(),
            )
        if provider in ("openai", "openai_compatible"):
            return OpenAIClientAdapter(
                api_key=settings.chat_openai_api_key,
                model=settings.chat_openai_model_name,
                timeout_seconds=settings.chat_timeout_seconds,
                base_url=cls._resolve_base_url(provider, settings),
            )
        raise ValueError(
            f"Unknown chat provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )

    @classmethod
    def create(cls, settings: Settings) -> ChatAssistant:
        """Create a ChatAssistant wired to the configured client."""
        return ChatAssistant(
            client=cls.create_client(settings),
            max_new_tokens=settings.chat_max_new_tokens,
            temperature=settings.chat_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        url = settings.chat_openai_base_url.strip()
        if not url:
            raise ValueError(
                "chat_openai_base_url is required for chat_provider=openai_compatible"
            )
        return url
