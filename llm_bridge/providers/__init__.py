"""
Provider registry.

Maps each provider name to the factory building its adapter. Factories take
``api_key`` and ``base_url`` keyword arguments; the generic OpenAI-compatible
factory also takes ``name``. ``llm_bridge.config.providers.PROVIDER_ENV``
holds the matching API key variables.
"""

from .anthropic import create_anthropic
from .base import LanguageModel, ProviderAdapter, ProviderError
from .errors import ErrorMapper
from .openai import (
    create_cohere,
    create_deepseek,
    create_google,
    create_groq,
    create_mistral,
    create_openai,
    create_openai_compatible,
)
from .xai import create_xai

PROVIDERS = {
    "anthropic": create_anthropic,
    "cohere": create_cohere,
    "deepseek": create_deepseek,
    "google": create_google,
    "groq": create_groq,
    "mistral": create_mistral,
    "openai": create_openai,
    "local": create_openai_compatible,
    "xai": create_xai,
}

__all__ = [
    "PROVIDERS",
    "LanguageModel",
    "ProviderAdapter",
    "ProviderError",
    "ErrorMapper",
]
