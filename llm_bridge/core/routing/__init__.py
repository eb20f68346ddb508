from .resolver import ModelFactory, build_provider, resolve_api_key, resolve_provider

__all__ = ["ModelFactory", "build_provider", "resolve_api_key", "resolve_provider"]
