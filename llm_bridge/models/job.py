"""Input side data model: the job read from STDIN and its normalized views."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TIMEOUT_MS = 60000


class Job(BaseModel):
    """The single input object of one invocation."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    params: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("params", mode="before")
    def validate_params(cls, v):
        # Anything other than an object is treated as "no parameters".
        return v if isinstance(v, dict) else {}

    @classmethod
    def from_payload(cls, payload: Any) -> "Job":
        if not isinstance(payload, dict):
            return cls()
        return cls.model_validate(payload)


class RequestParameters(BaseModel):
    """Normalized, immutable view of ``Job.params``."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    model: str
    base_url: str = ""
    system_prompt: Optional[str] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_tokens: Optional[int] = None
    # None means "unset", an empty list is an explicit empty list.
    stop_sequences: Optional[List[str]] = None
    expect_json: bool = False
    timeout_ms: float = DEFAULT_TIMEOUT_MS

    @field_validator("max_tokens", mode="before")
    def validate_max_tokens(cls, v):
        if v is None:
            return v
        return int(v)


class ProviderSelection(BaseModel):
    """Resolved provider, model name and credential."""

    model_config = ConfigDict(frozen=True)

    provider: str
    model: str
    api_key: str = ""
    base_url: str = ""
