"""
JSON detection in free-form model output.

Model responses may contain a JSON document either bare or inside a fenced
code block. Only the first fenced block is considered, and only candidates
wrapped in a matching ``{}`` or ``[]`` pair are parsed.
"""

import json
import re
from typing import Any, NamedTuple, Optional

from ...errors import JsonOutputError

_FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)


class JsonExtraction(NamedTuple):
    parsed: Any
    json_text: Optional[str]

    @property
    def found(self) -> bool:
        return self.json_text is not None

    @property
    def ok(self) -> bool:
        return self.parsed is not None


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


def _looks_like_json(candidate: str) -> bool:
    return (candidate.startswith("{") and candidate.endswith("}")) or (
        candidate.startswith("[") and candidate.endswith("]")
    )


def extract_json(text: Optional[str]) -> JsonExtraction:
    """Detect JSON responses, including fenced code blocks."""
    if not text:
        return JsonExtraction(None, None)
    candidate = text.strip()
    fenced = _FENCED_BLOCK.search(candidate)
    if fenced:
        candidate = fenced.group(1).strip()
    if not candidate or not _looks_like_json(candidate):
        return JsonExtraction(None, None)
    try:
        return JsonExtraction(json.loads(candidate, parse_constant=_reject_constant), candidate)
    except (ValueError, RecursionError):
        return JsonExtraction(None, candidate)


def interpret_response(text: Optional[str], expect_json: bool = False) -> Any:
    """
    Pick the envelope payload for a model response.

    Returns the parsed JSON value when there is one, else ``{"text": text}``.
    Raises ``JsonOutputError`` when JSON was demanded but none parsed.
    """
    text = text if isinstance(text, str) else ""
    extraction = extract_json(text)

    if expect_json and not extraction.ok:
        if extraction.found:
            raise JsonOutputError("Invalid JSON returned by model.")
        raise JsonOutputError("No JSON returned by model.")

    if extraction.ok:
        return extraction.parsed
    return {"text": text}
