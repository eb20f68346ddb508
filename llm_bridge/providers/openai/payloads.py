from __future__ import annotations

from typing import Any, Dict, List

from ...models.generation import GenerationParams


def build_messages(prompt: str, params: GenerationParams) -> List[Dict[str, str]]:
    """System prompt (if any) followed by the user prompt."""
    messages = []
    if params.system:
        messages.append({"role": "system", "content": params.system})
    messages.append({"role": "user", "content": prompt})
    return messages


def build_chat_payload(
    model_id: str,
    prompt: str,
    params: GenerationParams,
    max_tokens_field: str = "max_tokens",
) -> Dict[str, Any]:
    """Assemble chat.completions.create kwargs, leaving out unset options."""
    payload: Dict[str, Any] = {
        "model": model_id,
        "messages": build_messages(prompt, params),
    }
    if params.temperature is not None:
        payload["temperature"] = params.temperature
    if params.top_p is not None:
        payload["top_p"] = params.top_p
    if params.max_tokens is not None:
        payload[max_tokens_field] = params.max_tokens
    if params.stop is not None:
        payload["stop"] = params.stop
    return payload
