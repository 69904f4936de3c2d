from typing import Any, Mapping

import httpx

from .base import LLMClient
from .errors import LLMError, LLMRateLimitError


class OllamaLLMClient(LLMClient):
    """
    LLMClient implementation for a local Ollama instance.

    Expects an Ollama server running (by default) on http://localhost:11434.

    API reference (simplified):
    - POST /api/generate
      { "model": "...", "prompt": "...", "system": "...", "format": "json",
        "stream": false }
    """

    def __init__(
        self,
        base_url: str,
        model: str,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._client = client

    @property
    def provider_name(self) -> str:
        return "ollama"

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
        payload: dict[str, Any] = {
            "model": self._model,
            "prompt": prompt,
            "stream": False,
        }
        if system:
            payload["system"] = system
        if json_mode:
            payload["format"] = "json"

        # Allow some basic knobs via options without being too strict.
        model_options: dict[str, Any] = {}
        if options:
            temperature = options.get("temperature")
            if isinstance(temperature, (int, float)):
                model_options["temperature"] = float(temperature)

            num_predict = options.get("max_tokens") or options.get("num_predict")
            if isinstance(num_predict, int):
                model_options["num_predict"] = num_predict
        if model_options:
            payload["options"] = model_options

        url = f"{self._base_url}/api/generate"

        try:
            if self._client is None:
                async with httpx.AsyncClient(timeout=60.0) as client:
                    res = await client.post(url, json=payload)
            else:
                res = await self._client.post(url, json=payload)
            res.raise_for_status()
            data = res.json()
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == 429:
                raise LLMRateLimitError(f"Ollama rate limited: {exc}") from exc
            raise LLMError(f"Ollama request failed: {exc}") from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise LLMError(f"Ollama request failed: {exc}") from exc

        # For non-streaming, Ollama returns a single JSON with a 'response' field.
        response_text = data.get("response", "") if isinstance(data, dict) else ""
        if not isinstance(response_text, str):
            response_text = str(response_text)

        return response_text
