"""
The bridge pipeline: job in, envelope out.

``run_job`` is the single error boundary. Stage failures raise
``BridgeError`` subclasses that map to their own envelope code; any other
exception becomes an ``error`` envelope carrying its message.
"""

import logging
from typing import Callable, Mapping, Optional

from .config.settings import Settings
from .core.execution.executor import execute_request
from .core.normalization.json_extract import interpret_response
from .core.normalization.params import normalize_request
from .core.routing.resolver import build_provider, resolve_provider
from .errors import BridgeError
from .jobs import read_job
from .models.envelope import ErrorCode, OutputEnvelope, failure, success

logger = logging.getLogger(__name__)


async def run_job(
    raw: str,
    settings: Optional[Settings] = None,
    environ: Optional[Mapping[str, str]] = None,
    providers: Optional[Mapping[str, Callable]] = None,
) -> OutputEnvelope:
    """
    Run one job end to end.

    Args:
        raw: The complete STDIN payload
        settings: Runtime settings (defaults to ``Settings()``)
        environ: Environment used for key lookup (defaults to ``os.environ``)
        providers: Provider factory table (defaults to ``PROVIDERS``)

    Returns:
        The success or failure envelope; this function does not raise
        for ordinary exceptions.
    """
    settings = settings or Settings()
    try:
        job = read_job(raw)
        request = normalize_request(job.params, default_timeout_ms=settings.default_timeout_ms)
        selection = resolve_provider(
            request,
            environ=environ,
            generic_env=settings.generic_api_key_env,
            providers=providers,
        )
        logger.info("Resolved provider=%s model=%s", selection.provider, selection.model)

        model = build_provider(selection, providers=providers)(selection.model)
        result = await execute_request(model, request)

        data = interpret_response(result.text if result is not None else None, request.expect_json)
        return success(data)

    except BridgeError as e:
        logger.info("Job failed code=%s: %s", e.code.value, e.description)
        return failure(e.code, e.description)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        return failure(ErrorCode.ERROR, str(e) or "Unknown error")
