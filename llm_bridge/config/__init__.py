from .providers import (
    ANTHROPIC_DEFAULT_MAX_TOKENS,
    GENERIC_API_KEY_ENV,
    LOCAL_PROVIDER,
    OPENAI_COMPATIBLE_BASE_URLS,
    OPTIONAL_KEY_PROVIDERS,
    PROVIDER_ENV,
)
from .settings import Settings

__all__ = [
    "ANTHROPIC_DEFAULT_MAX_TOKENS",
    "GENERIC_API_KEY_ENV",
    "LOCAL_PROVIDER",
    "OPENAI_COMPATIBLE_BASE_URLS",
    "OPTIONAL_KEY_PROVIDERS",
    "PROVIDER_ENV",
    "Settings",
]
