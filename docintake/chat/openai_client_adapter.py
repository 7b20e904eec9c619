import httpx
import openai

from docintake.chat.client_base import BaseChatClient
from docintake.chat.exceptions import ChatNetworkError, ChatResponseError


class OpenAIClientAdapter(BaseChatClient):
    """Chat client adapter built on OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._model = model
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def generate(
        self,
        *,
        prompt: str,
        max_new_tokens: int,
        temperature: float,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                temperature=temperature,
                max_tokens=max_new_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ChatNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ChatNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ChatResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise ChatResponseError("AI returned empty response")
        return content
