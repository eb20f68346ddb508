"""
Provider configuration tables.

Adding a provider means one entry here (its API key variable) and one entry
in ``llm_bridge.providers.PROVIDERS`` (its client factory).
"""

# Provider-specific API key environment variables.
PROVIDER_ENV = {
    "anthropic": "ANTHROPIC_API_KEY",
    "cohere": "COHERE_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
    "google": "GOOGLE_API_KEY",
    "groq": "GROQ_API_KEY",
    "mistral": "MISTRAL_API_KEY",
    "openai": "OPENAI_API_KEY",
    "local": "LOCAL_API_KEY",
    "xai": "XAI_API_KEY",
}

# Cross-provider fallback key.
GENERIC_API_KEY_ENV = "AI_API_KEY"

# Generic OpenAI-compatible provider, selected whenever a base URL is given.
LOCAL_PROVIDER = "local"

# Providers that may run without an API key.
OPTIONAL_KEY_PROVIDERS = frozenset()

# OpenAI-compatible endpoints of hosted vendors served through the OpenAI client.
OPENAI_COMPATIBLE_BASE_URLS = {
    "cohere": "https://api.cohere.ai/compatibility/v1",
    "deepseek": "https://api.deepseek.com/v1",
    "google": "https://generativelanguage.googleapis.com/v1beta/openai/",
    "groq": "https://api.groq.com/openai/v1",
    "mistral": "https://api.mistral.ai/v1",
}

# Anthropic requires max_tokens on every request.
ANTHROPIC_DEFAULT_MAX_TOKENS = 4096
