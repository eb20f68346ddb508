"""Shared pytest fixtures for LLM Bridge tests."""

from unittest.mock import AsyncMock, Mock

import pytest

from tests.helpers.fakes import FakeFactory


@pytest.fixture
def fake_providers():
    """A provider table where every entry is a recording FakeFactory."""
    names = ["anthropic", "cohere", "deepseek", "google", "groq", "local", "mistral", "openai", "xai"]
    return {name: FakeFactory() for name in names}


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    env_vars = {
        "OPENAI_API_KEY": "test-openai-key",
        "ANTHROPIC_API_KEY": "test-anthropic-key",
        "XAI_API_KEY": "test-xai-key",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def mock_openai_client():
    """Mock OpenAI client."""
    client = Mock()

    completion = Mock()
    completion.choices = [Mock(message=Mock(content="Test response"), finish_reason="stop")]
    usage_mock = Mock()
    usage_mock.model_dump.return_value = {
        "prompt_tokens": 10,
        "completion_tokens": 5,
        "total_tokens": 15
    }
    completion.usage = usage_mock

    client.chat.completions.create = AsyncMock(return_value=completion)
    return client


@pytest.fixture
def mock_anthropic_client():
    """Mock Anthropic client."""
    client = Mock()

    message = Mock()
    message.content = [
        Mock(type="text", text="Test "),
        Mock(type="tool_use", text=None),
        Mock(type="text", text="response"),
    ]
    message.stop_reason = "end_turn"
    usage_mock = Mock()
    usage_mock.model_dump.return_value = {
        "input_tokens": 10,
        "output_tokens": 5
    }
    message.usage = usage_mock

    client.messages.create = AsyncMock(return_value=message)
    return client


@pytest.fixture
def mock_xai_client():
    """Mock xAI client."""
    client = Mock()

    chat = Mock()
    sample_result = Mock(content="Test response", finish_reason="stop", usage=None)
    chat.sample = AsyncMock(return_value=sample_result)

    client.chat.create = Mock(return_value=chat)
    return client
