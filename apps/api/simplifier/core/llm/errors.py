class LLMError(Exception):
    """Inference call failed (network, auth, bad response, ...)."""


class LLMRateLimitError(LLMError):
    """Provider rejected the call for rate-limit or quota reasons."""


class LLMConfigurationError(LLMError):
    """Client cannot be built from current settings (e.g. missing API key)."""
