from collections.abc import Callable

from simplifier.core.llm import LLMClient, get_llm_client


def get_llm_provider() -> Callable[[], LLMClient]:
    """
    FastAPI dependency returning the LLM client factory.

    Handlers call the factory only after validating input. Tests override
    this to inject a dummy client.
    """
    return get_llm_client
