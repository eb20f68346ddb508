"""
Credential and provider resolution.

Looks up the API key for the selected provider, validates the selection and
builds a callable that turns a model name into a ready model handle.
"""

import os
from typing import Callable, Mapping, Optional

from ...config.providers import GENERIC_API_KEY_ENV, LOCAL_PROVIDER, OPTIONAL_KEY_PROVIDERS, PROVIDER_ENV
from ...errors import EnvError, ParamsError
from ...models.job import ProviderSelection, RequestParameters
from ...providers import PROVIDERS
from ...providers.base import LanguageModel
from ..normalization.params import select_model

ModelFactory = Callable[[str], LanguageModel]


def resolve_api_key(
    provider: str,
    environ: Optional[Mapping[str, str]] = None,
    generic_env: str = GENERIC_API_KEY_ENV,
) -> str:
    """Resolve the provider API key, preferring provider-specific keys."""
    env = os.environ if environ is None else environ
    specific = PROVIDER_ENV.get(provider)
    return (specific and env.get(specific)) or env.get(generic_env) or ""


def resolve_provider(
    request: RequestParameters,
    environ: Optional[Mapping[str, str]] = None,
    generic_env: str = GENERIC_API_KEY_ENV,
    providers: Optional[Mapping[str, Callable]] = None,
) -> ProviderSelection:
    """
    Pick provider, model and key for a request and validate them.

    Raises:
        ParamsError: local provider without base URL, or unknown provider
        EnvError: no key found and the provider requires one
    """
    providers = PROVIDERS if providers is None else providers
    provider, model = select_model(request)
    api_key = resolve_api_key(provider, environ, generic_env)

    if provider == LOCAL_PROVIDER and not request.base_url:
        raise ParamsError(f"Parameter 'base_url' is required for provider '{LOCAL_PROVIDER}'.")

    if not api_key and not request.base_url and provider not in OPTIONAL_KEY_PROVIDERS:
        env_name = PROVIDER_ENV.get(provider) or generic_env
        raise EnvError(f"Missing API key. Set {env_name} or {generic_env}.")

    if provider not in providers:
        supported = ", ".join(sorted(providers))
        raise ParamsError(f"Unsupported provider '{provider}'. Supported providers: {supported}.")

    return ProviderSelection(provider=provider, model=model, api_key=api_key, base_url=request.base_url)


def build_provider(
    selection: ProviderSelection,
    providers: Optional[Mapping[str, Callable]] = None,
) -> ModelFactory:
    """Instantiate the provider with optional API key and base URL."""
    providers = PROVIDERS if providers is None else providers
    factory = providers.get(selection.provider)
    if factory is None:
        supported = ", ".join(sorted(providers))
        raise ParamsError(f"Unsupported provider '{selection.provider}'. Supported providers: {supported}.")

    opts = {}
    if selection.api_key:
        opts["api_key"] = selection.api_key
    if selection.base_url:
        opts["base_url"] = selection.base_url

    if selection.provider == LOCAL_PROVIDER:
        instance = factory(name=LOCAL_PROVIDER, **opts)
        return instance.chat_model

    return factory(**opts)
