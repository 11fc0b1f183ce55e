from functools import lru_cache

from pydantic_settings import BaseSettings

from uicritic.exceptions import ConfigurationError
from uicritic.models.analysis import (
    GenerationConfig,
    HarmBlockThreshold,
    HarmCategory,
    SafetyPolicy,
    SafetySetting,
)


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 9000
    log_level: str = "INFO"
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"
    temperature: float = 0.4
    top_k: int = 32
    top_p: float = 1.0
    max_output_tokens: int = 4096
    fetch_timeout: float = 30.0
    model_timeout: float = 120.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()


def validate_settings(settings: Settings | None = None) -> Settings:
    """Fail fast when a required secret is missing.

    Called before the server starts accepting connections.
    """
    settings = settings or get_settings()
    if not settings.gemini_api_key:
        raise ConfigurationError(
            "Gemini API key not configured. Get one at "
            "https://aistudio.google.com/apikey and set GEMINI_API_KEY in .env"
        )
    return settings


@lru_cache
def get_generation_config() -> GenerationConfig:
    settings = get_settings()
    return GenerationConfig(
        temperature=settings.temperature,
        top_k=settings.top_k,
        top_p=settings.top_p,
        max_output_tokens=settings.max_output_tokens,
    )


@lru_cache
def get_safety_policy() -> SafetyPolicy:
    return SafetyPolicy(rules=tuple(
        SafetySetting(category=category, threshold=HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE)
        for category in HarmCategory
    ))
