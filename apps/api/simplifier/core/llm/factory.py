from simplifier.core.config import get_settings

from .base import LLMClient
from .dummy import DummyLLMClient
from .errors import LLMConfigurationError
from .ollama import OllamaLLMClient
from .openai_client import OpenAILLMClient


def get_llm_client() -> LLMClient:
    """
    Build a request-scoped LLM client from the cached process settings.

    Also used as a FastAPI dependency, so tests can swap it out via
    `app.dependency_overrides`.

    Supported providers:
    - 'openai': hosted chat completions (needs OPENAI_API_KEY)
    - 'ollama': local Ollama server via HTTP
    - 'dummy' (or 'dev'): scripted in-memory client
    """
    settings = get_settings()
    provider = settings.llm_provider.lower()

    if provider == "openai":
        if not settings.openai_api_key:
            raise LLMConfigurationError("Missing OPENAI_API_KEY on server")
        return OpenAILLMClient(
            api_key=settings.openai_api_key,
            model=settings.llm_model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
        )

    if provider == "ollama":
        return OllamaLLMClient(
            base_url=settings.ollama_base_url,
            model=settings.llm_model,
        )

    if provider in {"dummy", "dev"}:
        return DummyLLMClient(model=settings.llm_model)

    raise LLMConfigurationError(
        f"Unsupported LLM provider: {provider!r}. "
        "Currently supported: 'openai', 'ollama', 'dummy'."
    )
