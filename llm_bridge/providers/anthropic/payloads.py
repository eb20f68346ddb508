from __future__ import annotations

from typing import Any, Dict

from ...config.providers import ANTHROPIC_DEFAULT_MAX_TOKENS
from ...models.generation import GenerationParams


def assemble_messages_params(model_id: str, prompt: str, params: GenerationParams) -> Dict[str, Any]:
    """Build messages.create kwargs; max_tokens is mandatory for Anthropic."""
    payload: Dict[str, Any] = {
        "model": model_id,
        "max_tokens": params.max_tokens or ANTHROPIC_DEFAULT_MAX_TOKENS,
        "messages": [{"role": "user", "content": prompt}],
    }
    if params.system:
        payload["system"] = params.system
    if params.temperature is not None:
        payload["temperature"] = params.temperature
    if params.top_p is not None:
        payload["top_p"] = params.top_p
    if params.stop is not None:
        payload["stop_sequences"] = params.stop
    return payload
