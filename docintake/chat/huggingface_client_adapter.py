from typing import Any, ClassVar

import httpx

from docintake.chat.client_base import BaseChatClient
from docintake.chat.exceptions import ChatNetworkError, ChatResponseError


class HuggingFaceClientAdapter(BaseChatClient):
    """Text-generation client for a Hugging Face style inference endpoint.

    The request body is either ``{"inputs": ..., "parameters": {...}}`` or
    ``{"text": ...}`` depending on ``payload_style``.
    """

    PAYLOAD_STYLES: ClassVar[tuple[str, ...]] = ("inputs", "text")
    NO_REPLY_MESSAGE: ClassVar[str] = (
        "I received your message but had trouble processing it."
    )

    def __init__(
        self,
        *,
        endpoint_url: str,
        timeout_seconds: int,
        api_token: str = "",
        payload_style: str = "inputs",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if payload_style not in self.PAYLOAD_STYLES:
            raise ValueError(
                f"Unknown chat payload style '{payload_style}'. "
                f"Choose from: {list(self.PAYLOAD_STYLES)}"
            )
        headers = {"Content-Type": "application/json"}
        if api_token:
            headers["Authorization"] = f"Bearer {api_token}"
        self._endpoint_url = endpoint_url
        self._payload_style = payload_style
        self._client = httpx.Client(
            timeout=timeout_seconds,
            headers=headers,
            transport=transport,
        )

    def generate(
        self,
        *,
        prompt: str,
        max_new_tokens: int,
        temperature: float,
    ) -> str:
        payload = self._build_payload(prompt, max_new_tokens, temperature)
        try:
            response = self._client.post(self._endpoint_url, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ChatNetworkError(
                f"Inference endpoint returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ChatNetworkError(f"Inference endpoint network error: {exc}") from exc

        try:
            result = response.json()
        except ValueError as exc:
            raise ChatResponseError(f"Invalid JSON response: {exc}") from exc
        return self._parse_result(result)

    def _build_payload(
        self, prompt: str, max_new_tokens: int, temperature: float
    ) -> dict[str, object]:
        if self._payload_style == "text":
            return {"text": prompt}
        return {
            "inputs": prompt,
            "parameters": {
                "max_new_tokens": max_new_tokens,
                "temperature": temperature,
                "do_sample": True,
            },
        }

    @classmethod
    def _parse_result(cls, result: Any) -> str:
        if isinstance(result, list) and result and isinstance(result[0], dict):
            generated = result[0].get("generated_text")
            if generated:
                return str(generated)
        if isinstance(result, dict):
            if result.get("generated_text"):
                return str(result["generated_text"])
            if result.get("error"):
                return f"Error: {result['error']}"
        return cls.NO_REPLY_MESSAGE
