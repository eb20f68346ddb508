"""
Error types for the bridge pipeline.

Every stage raises a ``BridgeError`` subclass carrying the envelope error code
and a human readable description. Anything else that escapes a stage is
reported under the ``error`` code by the pipeline boundary.
"""

from .models.envelope import ErrorCode


class BridgeError(Exception):
    """Base exception for failures that map to a specific envelope code."""

    code: ErrorCode = ErrorCode.ERROR

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description


class InputError(BridgeError):
    """Empty or unparsable job payload."""

    code = ErrorCode.INPUT


class ParamsError(BridgeError):
    """Missing or malformed request parameters."""

    code = ErrorCode.PARAMS


class EnvError(BridgeError):
    """No usable API key in the environment."""

    code = ErrorCode.ENV


class JsonOutputError(BridgeError):
    """JSON was demanded but the model did not return any."""

    code = ErrorCode.JSON


class RequestTimeoutError(Exception):
    """The generation request did not settle before its deadline."""

    def __init__(self, message: str = "AI request timed out", timeout_ms: float = None):
        super().__init__(message)
        self.timeout_ms = timeout_ms
