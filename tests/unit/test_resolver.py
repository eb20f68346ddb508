"""Unit tests for credential and provider resolution."""

import pytest

from llm_bridge.config.providers import PROVIDER_ENV
from llm_bridge.core.routing.resolver import build_provider, resolve_api_key, resolve_provider
from llm_bridge.errors import EnvError, ParamsError
from llm_bridge.models.envelope import ErrorCode
from llm_bridge.models.job import ProviderSelection, RequestParameters
from llm_bridge.providers import PROVIDERS


def _request(model, base_url=""):
    return RequestParameters(prompt="Hi", model=model, base_url=base_url)


class TestProviderTables:
    """The key table and the factory table list the same providers."""

    def test_tables_are_parallel(self):
        assert set(PROVIDER_ENV) == set(PROVIDERS)

    def test_supported_providers(self):
        assert sorted(PROVIDERS) == [
            "anthropic", "cohere", "deepseek", "google", "groq", "local", "mistral", "openai", "xai"
        ]


class TestResolveApiKey:
    """Key lookup precedence."""

    def test_provider_specific_key_wins(self):
        env = {"OPENAI_API_KEY": "specific", "AI_API_KEY": "generic"}
        assert resolve_api_key("openai", env) == "specific"

    def test_generic_key_fallback(self):
        assert resolve_api_key("groq", {"AI_API_KEY": "generic"}) == "generic"

    def test_empty_specific_key_falls_back(self):
        assert resolve_api_key("groq", {"GROQ_API_KEY": "", "AI_API_KEY": "generic"}) == "generic"

    def test_unknown_provider_uses_generic_key(self):
        assert resolve_api_key("acme", {"AI_API_KEY": "generic"}) == "generic"

    def test_no_key(self):
        assert resolve_api_key("openai", {}) == ""

    def test_custom_generic_variable(self):
        assert resolve_api_key("openai", {"MY_KEY": "k"}, generic_env="MY_KEY") == "k"

    def test_reads_process_environment_by_default(self, mock_env_vars):
        assert resolve_api_key("anthropic") == "test-anthropic-key"


class TestResolveProvider:
    """Validation order and messages."""

    def test_hosted_provider(self):
        selection = resolve_provider(_request("openai/gpt-4o-mini"), {"OPENAI_API_KEY": "sk-test"})
        assert selection == ProviderSelection(provider="openai", model="gpt-4o-mini", api_key="sk-test")

    def test_local_requires_base_url(self):
        with pytest.raises(ParamsError) as exc_info:
            resolve_provider(_request("local/llama3"), {"LOCAL_API_KEY": "k"})
        assert exc_info.value.description == "Parameter 'base_url' is required for provider 'local'."

    def test_local_base_url_check_precedes_key_check(self):
        with pytest.raises(ParamsError, match="base_url"):
            resolve_provider(_request("local/llama3"), {})

    def test_missing_key(self):
        with pytest.raises(EnvError) as exc_info:
            resolve_provider(_request("anthropic/claude-3-5-haiku-latest"), {})
        assert exc_info.value.code == ErrorCode.ENV
        assert exc_info.value.description == "Missing API key. Set ANTHROPIC_API_KEY or AI_API_KEY."

    def test_missing_key_for_unknown_provider_names_generic_variable(self):
        with pytest.raises(EnvError) as exc_info:
            resolve_provider(_request("acme/model-1"), {})
        assert exc_info.value.description == "Missing API key. Set AI_API_KEY or AI_API_KEY."

    def test_unknown_provider_lists_supported(self):
        with pytest.raises(ParamsError) as exc_info:
            resolve_provider(_request("acme/model-1"), {"AI_API_KEY": "k"})
        assert exc_info.value.description == (
            "Unsupported provider 'acme'. Supported providers: "
            "anthropic, cohere, deepseek, google, groq, local, mistral, openai, xai."
        )

    def test_base_url_allows_missing_key(self):
        selection = resolve_provider(_request("local/qwen2.5", "http://localhost:11434/v1"), {})
        assert selection.provider == "local"
        assert selection.model == "qwen2.5"
        assert selection.api_key == ""
        assert selection.base_url == "http://localhost:11434/v1"

    def test_base_url_uses_local_key(self):
        selection = resolve_provider(_request("qwen2.5", "http://localhost:11434/v1"), {"LOCAL_API_KEY": "lk"})
        assert selection.api_key == "lk"

    def test_custom_provider_table(self, fake_providers):
        fake_providers.pop("xai")
        with pytest.raises(ParamsError, match="Supported providers: anthropic, cohere"):
            resolve_provider(_request("xai/grok-3"), {"XAI_API_KEY": "k"}, providers=fake_providers)


class TestBuildProvider:
    """Client construction."""

    def test_hosted_provider_options(self, fake_providers):
        selection = ProviderSelection(provider="openai", model="gpt-4o", api_key="sk-test")
        factory = build_provider(selection, providers=fake_providers)

        model = factory("gpt-4o")

        assert fake_providers["openai"].calls == [{"api_key": "sk-test"}]
        assert model.model_id == "gpt-4o"

    def test_local_provider_uses_chat_model(self, fake_providers):
        selection = ProviderSelection(provider="local", model="foo", base_url="http://localhost:8080/v1")
        factory = build_provider(selection, providers=fake_providers)

        model = factory("foo")

        assert fake_providers["local"].calls == [{"name": "local", "base_url": "http://localhost:8080/v1"}]
        instance = fake_providers["local"].instances[0]
        assert factory == instance.chat_model
        assert model.provider == "local"

    def test_unknown_provider(self, fake_providers):
        with pytest.raises(ParamsError, match="Unsupported provider 'acme'"):
            build_provider(ProviderSelection(provider="acme", model="m"), providers=fake_providers)

    def test_real_local_factory(self):
        selection = ProviderSelection(provider="local", model="foo", base_url="http://localhost:8080/v1")
        model = build_provider(selection)("foo")

        assert model.provider == "local"
        assert model.model_id == "foo"
        assert model.adapter.base_url == "http://localhost:8080/v1"

    def test_real_hosted_vendor_factory(self):
        selection = ProviderSelection(provider="groq", model="llama-3.1-8b-instant", api_key="gsk")
        model = build_provider(selection)("llama-3.1-8b-instant")

        assert model.provider == "groq"
        assert model.adapter.base_url == "https://api.groq.com/openai/v1"
