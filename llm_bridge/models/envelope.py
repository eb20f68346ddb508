"""Output envelope written to standard output."""

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Failure codes carried in the envelope ``code`` field."""
    INPUT = "input"
    PARAMS = "params"
    ENV = "env"
    JSON = "json"
    ERROR = "error"


class SuccessEnvelope(BaseModel):
    xy: Literal[1] = 1
    code: Literal[0] = 0
    data: Any


class FailureEnvelope(BaseModel):
    xy: Literal[1] = 1
    code: ErrorCode
    description: str


OutputEnvelope = Union[SuccessEnvelope, FailureEnvelope]


def success(data: Any) -> SuccessEnvelope:
    return SuccessEnvelope(data=data)


def failure(code: ErrorCode, description: str) -> FailureEnvelope:
    return FailureEnvelope(code=code, description=description)
