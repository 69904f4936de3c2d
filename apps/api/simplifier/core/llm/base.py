from abc import ABC, abstractmethod
from typing import Any, Mapping


class LLMClient(ABC):
    """
    Minimal interface for an LLM client.

    Concrete implementations (OpenAI, Ollama, dummy) implement this
    interface so the summarizer stays decoupled from any specific
    provider's API.

    Implementations must translate provider failures into the exceptions
    in `errors` (LLMError, LLMRateLimitError, LLMConfigurationError).
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        ...

    @property
    @abstractmethod
    def model_name(self) -> str:
        ...

    @abstractmethod
    async def generate(
        self,
        *,
        prompt: str,
        system: str | None = None,
        json_mode: bool = False,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """
        Generate a single text completion given a prompt.

        'system' is an optional system instruction. 'json_mode' asks the
        provider to constrain output to a JSON object where it supports that.

        'options' can carry provider-specific knobs (temperature, max_tokens,
        etc.). Implementations should treat unknown options leniently.
        """
        ...
