"""
Parameter normalization module.

Turns the loosely typed ``params`` mapping of a job into an immutable
``RequestParameters`` and splits the model identifier into provider and
model parts.
"""

import math
import re
from typing import Any, List, Mapping, Optional, Tuple

from ...config.providers import LOCAL_PROVIDER
from ...errors import ParamsError
from ...models.job import DEFAULT_TIMEOUT_MS, RequestParameters

_STOP_SEPARATORS = re.compile(r"\r?\n|,")
_LOCAL_PREFIX = LOCAL_PROVIDER + "/"


def parse_number(value: Any, fallback: Any = None) -> Any:
    """
    Convert a user-provided numeric parameter.

    Returns ``fallback`` when the value is absent, empty, not convertible or
    not finite. Integers are kept as integers.
    """
    if value is None or value == "":
        return fallback
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return fallback
    if not math.isfinite(number):
        return fallback
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return number


def parse_stop_sequences(value: Any) -> Optional[List[str]]:
    """
    Normalize stop sequences to a list of strings.

    A list is converted element-wise with empty entries dropped. Any other
    value is split on newlines and commas. ``None`` means "unset".
    """
    if isinstance(value, (list, tuple)):
        return [text for text in (str(item) for item in value) if text]
    if not value:
        return None
    parts = [part.strip() for part in _STOP_SEPARATORS.split(str(value))]
    parts = [part for part in parts if part]
    return parts or None


def parse_expect_json(value: Any) -> bool:
    """Only boolean ``True`` or the string ``"true"`` (any case) count."""
    if value is True:
        return True
    return isinstance(value, str) and value.lower() == "true"


def split_model_identifier(value: Any) -> Optional[Tuple[str, str]]:
    """Parse ``"provider/model"`` into its parts, or return None."""
    raw = str(value or "").strip()
    if not raw:
        return None
    parts = raw.split("/")
    if len(parts) < 2:
        return None
    provider = parts[0].lower()
    model = "/".join(parts[1:])
    return provider, model


def normalize_request(params: Mapping[str, Any], default_timeout_ms: float = DEFAULT_TIMEOUT_MS) -> RequestParameters:
    """Validate required fields and coerce the optional ones."""
    prompt = params.get("prompt")
    if not isinstance(prompt, str) or not prompt.strip():
        raise ParamsError("Required parameter 'prompt' was not provided.")

    base_url = str(params["base_url"]).strip() if params.get("base_url") else ""
    model = str(params.get("model") or "").strip()
    if not model:
        raise ParamsError("Required parameter 'model' was not provided.")

    system_prompt = params.get("system_prompt")

    return RequestParameters(
        prompt=prompt,
        model=model,
        base_url=base_url,
        system_prompt=str(system_prompt) if system_prompt else None,
        temperature=parse_number(params.get("temperature")),
        top_p=parse_number(params.get("top_p")),
        max_tokens=parse_number(params.get("max_tokens")),
        stop_sequences=parse_stop_sequences(params.get("stop_sequences")),
        expect_json=parse_expect_json(params.get("expect_json")),
        timeout_ms=parse_number(params.get("timeout_ms"), default_timeout_ms),
    )


def select_model(request: RequestParameters) -> Tuple[str, str]:
    """
    Decide provider and model name for a request.

    A base URL always selects the local OpenAI-compatible provider and the
    model string is used verbatim, minus one leading ``local/`` prefix.
    """
    if request.base_url:
        model = request.model
        if model.lower().startswith(_LOCAL_PREFIX):
            model = model[len(_LOCAL_PREFIX):]
        return LOCAL_PROVIDER, model

    parsed = split_model_identifier(request.model)
    if parsed is None:
        raise ParamsError("Parameter 'model' must be in the form 'provider/model'.")
    return parsed
