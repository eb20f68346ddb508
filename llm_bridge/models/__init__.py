from .envelope import ErrorCode, FailureEnvelope, OutputEnvelope, SuccessEnvelope
from .generation import GenerationParams, GenerationResponse
from .job import DEFAULT_TIMEOUT_MS, Job, ProviderSelection, RequestParameters

__all__ = [
    "ErrorCode",
    "FailureEnvelope",
    "OutputEnvelope",
    "SuccessEnvelope",
    "GenerationParams",
    "GenerationResponse",
    "DEFAULT_TIMEOUT_MS",
    "Job",
    "ProviderSelection",
    "RequestParameters",
]
