from __future__ import annotations

from typing import Any, Optional


def extract_text_from_chat_completion(response: Any) -> Optional[str]:
    """Return the first choice's message content, or None when absent."""
    choices = getattr(response, "choices", None)
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    return content if isinstance(content, str) else None


def extract_finish_reason(response: Any) -> Optional[str]:
    choices = getattr(response, "choices", None)
    if not choices:
        return None
    reason = getattr(choices[0], "finish_reason", None)
    return reason if isinstance(reason, str) else None
