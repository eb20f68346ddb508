"""
Structured logging utility for the bridge and its provider adapters.

Log records always go to stderr; stdout carries nothing but the output
envelope.
"""

import logging
import sys
import time
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Optional

from ..config.settings import Settings

# Third-party loggers that are only let through when warnings are enabled.
SDK_LOGGERS = ("openai", "anthropic", "httpx", "httpcore", "xai_sdk", "grpc", "py.warnings")

_HANDLER_NAME = "llm_bridge.stderr"


def configure_logging(settings: Settings, stream=None) -> logging.Logger:
    """
    Attach a stderr handler to the ``llm_bridge`` logger and tune SDK loggers.

    Args:
        settings: Runtime settings (level and warning visibility)
        stream: Optional stream override, defaults to ``sys.stderr``

    Returns:
        The configured package logger
    """
    root = logging.getLogger("llm_bridge")
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    root.setLevel(level)

    handler = next((h for h in root.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        root.addHandler(handler)
    elif stream is not None:
        handler.setStream(stream)
    root.propagate = False

    logging.captureWarnings(True)
    sdk_level = logging.WARNING if settings.log_warnings else logging.ERROR
    for name in SDK_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)
    return root


class ProviderLogger:
    """Structured logger for provider adapters."""

    def __init__(self, provider_name: str):
        """
        Initialize logger for a specific provider.

        Args:
            provider_name: Name of the provider (e.g., "openai", "anthropic")
        """
        self.provider = provider_name
        self.logger = logging.getLogger(f"llm_bridge.providers.{provider_name}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"provider={self.provider}"]

        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")

        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, model: Optional[str] = None,
              request_id: Optional[str] = None, **kwargs):
        self.logger.debug(
            self._format_message(message, model=model, request_id=request_id, **kwargs)
        )

    def info(self, message: str, model: Optional[str] = None,
             request_id: Optional[str] = None, **kwargs):
        self.logger.info(
            self._format_message(message, model=model, request_id=request_id, **kwargs)
        )

    def error(self, message: str, model: Optional[str] = None,
              request_id: Optional[str] = None, error: Optional[BaseException] = None, **kwargs):
        if error is not None:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)

        self.logger.error(
            self._format_message(message, model=model, request_id=request_id, **kwargs)
        )

    @contextmanager
    def track_request(self, method: str, model: str, request_id: Optional[str] = None):
        """
        Context manager to track request timing and log key events.

        Cancellation (timeouts) is logged as well and re-raised untouched.

        Yields:
            Dict with request metadata including request_id
        """
        if request_id is None:
            request_id = str(uuid.uuid4())[:8]

        start_time = time.time()
        self.debug(f"Starting {method} request", model=model, request_id=request_id)

        metadata = {
            'request_id': request_id,
            'model': model,
            'method': method,
            'start_time': start_time
        }

        try:
            yield metadata
        except BaseException as e:
            self.error(
                f"Failed {method} request",
                model=model,
                request_id=request_id,
                duration_ms=int((time.time() - start_time) * 1000),
                error=e
            )
            raise

        self.info(
            f"Completed {method} request",
            model=model,
            request_id=request_id,
            duration_ms=int((time.time() - start_time) * 1000)
        )

    def log_usage(self, usage: Dict[str, Any], model: str, request_id: str):
        """Log token usage information."""
        self.info(
            "Token usage",
            model=model,
            request_id=request_id,
            prompt_tokens=usage.get('prompt_tokens', 0),
            completion_tokens=usage.get('completion_tokens', 0),
            total_tokens=usage.get('total_tokens', 0)
        )

    def log_error_classification(self, classification: Dict[str, Any], model: str, request_id: str):
        """Log status and retry metadata of a mapped provider error."""
        fields = {key: value for key, value in classification.items() if key != 'provider'}
        self.info("Provider error", model=model, request_id=request_id, **fields)
