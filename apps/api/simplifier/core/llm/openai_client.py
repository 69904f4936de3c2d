from typing import Any, Mapping

import httpx
from openai import APIError, AsyncOpenAI, RateLimitError

from .base import LLMClient
from .errors import LLMError, LLMRateLimitError


class OpenAILLMClient(LLMClient):
    """
    LLMClient implementation for the hosted OpenAI chat completions API.

    Unless an http_client is injected (the caller then owns it), the SDK
    client and its connection pool are opened per call and closed when the
    call returns. The SDK's own retry loop is disabled (max_retries=0): a
    failed call is surfaced to the caller, never retried here.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        *,
        temperature: float = 0.2,
        max_tokens: int = 1200,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._api_key = api_key
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "openai"

    @property
    def model_name(self) -> str:
        return self._model

    async def generate(
        self,
        *,
        prompt: str,
        system: str | None = None,
        json_mode: bool = False,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        messages: list[dict[str, str]] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        temperature = self._temperature
        max_tokens = self._max_tokens
        if options:
            if isinstance(options.get("temperature"), (int, float)):
                temperature = float(options["temperature"])
            if isinstance(options.get("max_tokens"), int):
                max_tokens = options["max_tokens"]

        kwargs: dict[str, Any] = {
            "model": self._model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            if self._http_client is None:
                async with AsyncOpenAI(api_key=self._api_key, max_retries=0) as client:
                    resp = await client.chat.completions.create(**kwargs)
            else:
                client = AsyncOpenAI(
                    api_key=self._api_key,
                    max_retries=0,
                    http_client=self._http_client,
                )
                resp = await client.chat.completions.create(**kwargs)
        except RateLimitError as exc:
            raise LLMRateLimitError(f"OpenAI rate limit/quota: {exc}") from exc
        except APIError as exc:
            raise LLMError(f"OpenAI request failed: {exc}") from exc

        if not resp.choices:
            return ""
        content = resp.choices[0].message.content
        return content if isinstance(content, str) else str(content or "")
