"""
Error mapping utilities for provider adapters.

Converts SDK exceptions into ``ProviderError`` while keeping the original
message, so the envelope reports what the provider said. Status code and
retry hints are kept as metadata for logging; nothing here retries.
"""

from typing import Any, Dict, Optional

import httpx

from .base import ProviderError

# HTTP status codes that indicate a transient failure
RETRYABLE_STATUS_CODES = {408, 429, 500, 502, 503, 504}

_RATE_LIMIT_PHRASES = ('rate limit', 'too many requests', 'quota exceeded', 'too_many_requests')


class ErrorMapper:
    """Maps provider-specific errors to standardized ProviderError."""

    @staticmethod
    def get_status_code(error: Exception) -> Optional[int]:
        status_code = getattr(error, 'status_code', None)
        if status_code is None:
            response = getattr(error, 'response', None)
            status_code = getattr(response, 'status_code', None)
        return status_code if isinstance(status_code, int) else None

    @staticmethod
    def is_retryable(error: Exception) -> bool:
        """Determine if an error is transient."""
        if ErrorMapper.get_status_code(error) in RETRYABLE_STATUS_CODES:
            return True
        if isinstance(error, (httpx.TimeoutException, httpx.ConnectError)):
            return True
        error_msg = str(error).lower()
        return any(phrase in error_msg for phrase in _RATE_LIMIT_PHRASES)

    @staticmethod
    def get_retry_after(error: Exception) -> Optional[float]:
        """Extract the Retry-After header value from an error, if present."""
        response = getattr(error, 'response', None)
        headers = getattr(response, 'headers', None)
        if headers:
            retry_after = headers.get('Retry-After')
            if retry_after:
                try:
                    return float(retry_after)
                except (TypeError, ValueError):
                    return None
        return None

    @staticmethod
    def map_error(error: Exception, provider: str) -> ProviderError:
        """
        Wrap an SDK exception for ``provider``.

        Args:
            error: The exception raised by the SDK call
            provider: Provider name

        Returns:
            ProviderError carrying the original message and metadata
        """
        if isinstance(error, ProviderError):
            return error

        message = getattr(error, 'message', None) or str(error) or type(error).__name__
        provider_error = ProviderError(
            message=str(message),
            provider=provider,
            status_code=ErrorMapper.get_status_code(error),
            retry_after=ErrorMapper.get_retry_after(error)
        )
        provider_error.is_retryable = ErrorMapper.is_retryable(error)
        provider_error.original_error = error
        return provider_error

    @staticmethod
    def get_error_classification(error: ProviderError) -> Dict[str, Any]:
        """Summarize a ProviderError for logging."""
        return {
            'provider': error.provider,
            'status_code': error.status_code,
            'is_retryable': error.is_retryable,
            'retry_after': error.retry_after,
            'error_type': type(error.original_error).__name__ if error.original_error is not None else None,
        }
