"""Runtime settings, read once from the environment and passed explicitly."""

import math
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from ..models.job import DEFAULT_TIMEOUT_MS
from .providers import GENERIC_API_KEY_ENV

LOG_LEVEL_ENV = "LLM_BRIDGE_LOG_LEVEL"
LOG_WARNINGS_ENV = "LLM_BRIDGE_LOG_WARNINGS"
TIMEOUT_ENV = "LLM_BRIDGE_TIMEOUT_MS"

_TRUE_VALUES = ("1", "true", "y", "yes", "on")


class Settings(BaseModel):
    """Process configuration for one invocation."""
    log_level: str = Field(default="WARNING", description="Level for the stderr log handler")
    log_warnings: bool = Field(default=False, description="Let SDK warnings through to stderr")
    default_timeout_ms: float = Field(default=DEFAULT_TIMEOUT_MS, gt=0, description="Timeout when timeout_ms is unset")
    generic_api_key_env: str = Field(default=GENERIC_API_KEY_ENV, description="Cross-provider API key variable")

    @field_validator('log_level')
    def validate_log_level(cls, v):
        return (v or "WARNING").strip().upper()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        values = {}
        if env.get(LOG_LEVEL_ENV):
            values["log_level"] = env[LOG_LEVEL_ENV]
        if env.get(LOG_WARNINGS_ENV):
            values["log_warnings"] = env[LOG_WARNINGS_ENV].strip().lower() in _TRUE_VALUES
        timeout = (env.get(TIMEOUT_ENV) or "").strip()
        if timeout:
            try:
                parsed = float(timeout)
            except ValueError:
                parsed = 0
            if math.isfinite(parsed) and parsed > 0:
                values["default_timeout_ms"] = parsed
        return cls(**values)
