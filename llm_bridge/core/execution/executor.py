"""
Request execution with a hard deadline.

Exactly one generation request is issued. ``asyncio.wait_for`` owns the
deadline: on expiry the in-flight call is cancelled and awaited before
``RequestTimeoutError`` is raised, and the timer is disarmed whichever way
the call settles.
"""

import asyncio
import logging
import uuid

from ...errors import RequestTimeoutError
from ...models.generation import GenerationParams, GenerationResponse
from ...models.job import RequestParameters
from ...providers.base import LanguageModel

logger = logging.getLogger(__name__)


def build_generation_params(request: RequestParameters, request_id: str = None) -> GenerationParams:
    """Carry over only the options the caller set."""
    return GenerationParams(
        system=request.system_prompt,
        temperature=request.temperature,
        top_p=request.top_p,
        max_tokens=request.max_tokens,
        stop=request.stop_sequences,
        metadata={"request_id": request_id} if request_id else None,
    )


async def execute_request(model: LanguageModel, request: RequestParameters) -> GenerationResponse:
    """
    Send the prompt to the model under the request's timeout.

    Raises:
        RequestTimeoutError: the call did not settle within ``timeout_ms``
        Exception: whatever the provider call raised, unchanged
    """
    request_id = str(uuid.uuid4())[:8]
    params = build_generation_params(request, request_id)
    timeout_s = max(request.timeout_ms, 0) / 1000.0

    logger.debug("Sending request %s to %r (timeout_ms=%s)", request_id, model, request.timeout_ms)
    try:
        return await asyncio.wait_for(model.generate(request.prompt, params), timeout=timeout_s)
    except asyncio.TimeoutError:
        logger.warning("Request %s timed out after %sms", request_id, request.timeout_ms)
        raise RequestTimeoutError(timeout_ms=request.timeout_ms) from None
