"""
LLM Bridge

Command-line adapter that forwards one prompt to an LLM provider and reports
the result as a single JSON envelope.
"""

__version__ = "0.1.0"

from .config.settings import Settings
from .errors import BridgeError, EnvError, InputError, JsonOutputError, ParamsError, RequestTimeoutError
from .models.envelope import ErrorCode, FailureEnvelope, SuccessEnvelope
from .pipeline import run_job
from .providers import PROVIDERS

__all__ = [
    "__version__",
    "Settings",
    "BridgeError",
    "EnvError",
    "InputError",
    "JsonOutputError",
    "ParamsError",
    "RequestTimeoutError",
    "ErrorCode",
    "FailureEnvelope",
    "SuccessEnvelope",
    "run_job",
    "PROVIDERS",
]
