from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List


class GenerationParams(BaseModel):
    """
    Normalized generation options shared by all providers.

    Every field is optional. Provider adapters only forward the fields that
    are set, so an unset option never reaches the provider payload. Values
    are passed through as given; the provider validates ranges.
    """
    system: Optional[str] = Field(None, description="System prompt")
    max_tokens: Optional[int] = Field(None, description="Maximum tokens to generate")
    temperature: Optional[float] = Field(None, description="Sampling temperature")
    top_p: Optional[float] = Field(None, description="Nucleus sampling parameter")
    stop: Optional[List[str]] = Field(None, description="Stop sequences")
    metadata: Optional[Dict[str, Any]] = Field(
        None,
        description="Additional metadata (request_id, etc.)"
    )


class GenerationResponse(BaseModel):
    """Response model for generation."""
    text: Optional[str] = None
    model: str
    usage: Dict[str, Any] = Field(default_factory=dict)
    provider: str
    finish_reason: Optional[str] = None
