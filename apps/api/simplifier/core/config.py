from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # API metadata
    api_name: str = "Contract Simplifier API"
    api_version: str = "0.1.0"

    # Server config
    api_port: int = 8000
    log_level: str = "INFO"

    # Local frontend dev origins (Next.js / Vite defaults)
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # LLM provider settings (hosted OpenAI by default)
    llm_provider: str = "openai"  # options: "openai", "ollama", "dummy"
    llm_model: str = "gpt-4o"
    llm_temperature: float = 0.2
    llm_max_tokens: int = 1200

    # OpenAI config
    openai_api_key: str | None = None

    # Ollama config
    ollama_base_url: str = "http://localhost:11434"

    # Input budgets (characters). Longer input is clipped, not chunked.
    max_input_chars: int = 12_000
    max_extract_chars: int = 12_000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings instance so we don't re-parse env vars on every request.
    """
    return Settings()
