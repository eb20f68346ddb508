"""Job reader and envelope writer for the STDIN/STDOUT protocol."""

import json
from typing import Any, Dict, TextIO, Union

from .errors import InputError
from .models.envelope import OutputEnvelope
from .models.job import Job


def read_job(raw: str) -> Job:
    """
    Parse the complete STDIN payload into a Job.

    Raises:
        InputError: payload is empty or not valid JSON
    """
    raw = (raw or "").strip()
    if not raw:
        raise InputError("No JSON input received on STDIN.")
    try:
        payload = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise InputError(f"Failed to parse JSON input: {e}")
    return Job.from_payload(payload)


def dump_envelope(envelope: Union[OutputEnvelope, Dict[str, Any]]) -> str:
    if not isinstance(envelope, dict):
        envelope = envelope.model_dump(mode="json")
    return json.dumps(envelope, ensure_ascii=False, separators=(",", ":"))


def write_envelope(envelope: Union[OutputEnvelope, Dict[str, Any]], stream: TextIO) -> None:
    """Write exactly one envelope line and flush."""
    stream.write(dump_envelope(envelope) + "\n")
    stream.flush()
