"""Unit tests for settings and logging configuration."""

import io
import logging

import pytest

from llm_bridge.config.settings import Settings
from llm_bridge.observability.logging import ProviderLogger, configure_logging


class TestSettings:
    """Test reading settings from an environment mapping."""

    def test_defaults(self):
        settings = Settings.from_env({})

        assert settings.log_level == "WARNING"
        assert settings.log_warnings is False
        assert settings.default_timeout_ms == 60000
        assert settings.generic_api_key_env == "AI_API_KEY"

    def test_from_env(self):
        settings = Settings.from_env({
            "LLM_BRIDGE_LOG_LEVEL": "debug",
            "LLM_BRIDGE_LOG_WARNINGS": "yes",
            "LLM_BRIDGE_TIMEOUT_MS": "1500",
        })

        assert settings.log_level == "DEBUG"
        assert settings.log_warnings is True
        assert settings.default_timeout_ms == 1500

    @pytest.mark.parametrize("value", ["abc", "-5", "0", "inf"])
    def test_invalid_timeout_is_ignored(self, value):
        assert Settings.from_env({"LLM_BRIDGE_TIMEOUT_MS": value}).default_timeout_ms == 60000


class TestConfigureLogging:
    """Logging goes to the given stream and SDK noise is gated by settings."""

    def test_records_go_to_stream(self):
        stream = io.StringIO()
        configure_logging(Settings(log_level="INFO"), stream=stream)

        logging.getLogger("llm_bridge.tests").info("hello from test")

        assert "hello from test" in stream.getvalue()

    def test_single_handler(self):
        configure_logging(Settings(), stream=io.StringIO())
        configure_logging(Settings(), stream=io.StringIO())

        handlers = [h for h in logging.getLogger("llm_bridge").handlers if h.get_name() == "llm_bridge.stderr"]
        assert len(handlers) == 1

    def test_sdk_warnings_suppressed_by_default(self):
        configure_logging(Settings(), stream=io.StringIO())
        assert logging.getLogger("openai").level == logging.ERROR
        assert logging.getLogger("httpx").level == logging.ERROR

    def test_sdk_warnings_enabled(self):
        configure_logging(Settings(log_warnings=True), stream=io.StringIO())
        assert logging.getLogger("anthropic").level == logging.WARNING

    def test_unknown_level_falls_back_to_warning(self):
        root = configure_logging(Settings(log_level="chatty"), stream=io.StringIO())
        assert root.level == logging.WARNING


class TestProviderLogger:
    """Test structured message formatting."""

    def test_format_message(self):
        logger = ProviderLogger("openai")
        message = logger._format_message("Token usage", model="gpt-4o", request_id=None, total_tokens=15)
        assert message == "[provider=openai model=gpt-4o total_tokens=15] Token usage"

    def test_track_request_logs_failure(self):
        stream = io.StringIO()
        configure_logging(Settings(log_level="DEBUG"), stream=stream)
        logger = ProviderLogger("anthropic")

        with pytest.raises(RuntimeError):
            with logger.track_request("generate", "claude-3-5-haiku-latest", request_id="req1"):
                raise RuntimeError("boom")

        output = stream.getvalue()
        assert "Starting generate request" in output
        assert "Failed generate request" in output
        assert "error_type=RuntimeError" in output
        assert "request_id=req1" in output

    def test_log_error_classification(self):
        stream = io.StringIO()
        configure_logging(Settings(log_level="INFO"), stream=stream)
        logger = ProviderLogger("openai")

        logger.log_error_classification(
            {"provider": "openai", "status_code": 429, "is_retryable": True, "retry_after": 30.0,
             "error_type": "RateLimitError"},
            "gpt-4o",
            "req2",
        )

        output = stream.getvalue()
        assert "Provider error" in output
        assert output.count("provider=openai") == 1
        assert "status_code=429" in output
        assert "is_retryable=True" in output
        assert "retry_after=30.0" in output
        assert "error_type=RateLimitError" in output
