from .base import LLMClient
from .dummy import DummyLLMClient
from .errors import LLMConfigurationError, LLMError, LLMRateLimitError
from .factory import get_llm_client
from .ollama import OllamaLLMClient
from .openai_client import OpenAILLMClient

__all__ = [
    "LLMClient",
    "DummyLLMClient",
    "OllamaLLMClient",
    "OpenAILLMClient",
    "LLMError",
    "LLMRateLimitError",
    "LLMConfigurationError",
    "get_llm_client",
]
