"""
Usage normalization module.

Maps provider-specific token accounting onto one shape:
``{"prompt_tokens": int, "completion_tokens": int, "total_tokens": int}``.
"""

from typing import Any, Dict, Optional


def normalize_usage(usage_data: Optional[Dict[str, Any]], provider: str) -> Dict[str, Any]:
    """Normalize usage data into the standard shape."""
    normalized = {
        "prompt_tokens": 0,
        "completion_tokens": 0,
        "total_tokens": 0,
    }
    if not usage_data:
        return normalized

    if provider == "anthropic":
        normalized["prompt_tokens"] = usage_data.get("input_tokens") or 0
        normalized["completion_tokens"] = usage_data.get("output_tokens") or 0
    else:
        normalized["prompt_tokens"] = usage_data.get("prompt_tokens") or 0
        normalized["completion_tokens"] = usage_data.get("completion_tokens") or 0
        normalized["total_tokens"] = usage_data.get("total_tokens") or 0

    if not normalized["total_tokens"]:
        normalized["total_tokens"] = normalized["prompt_tokens"] + normalized["completion_tokens"]
    return normalized
