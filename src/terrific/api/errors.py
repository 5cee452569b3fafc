"""Conversion of adapter failures into error envelopes."""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from terrific.adapters.base.exceptions import AdapterError
from terrific.models.response import ErrorEnvelope

logger = logging.getLogger(__name__)

#: Envelope ``error`` used when no route-specific label applies.
GENERIC_FAILURE = "Request failed"


def envelope_for(exc: AdapterError, failure_message: str) -> ErrorEnvelope:
    """Caller mistakes and misconfiguration speak for themselves; upstream
    failures go under the route's label with the cause in ``details``."""
    if exc.message_is_error:
        return ErrorEnvelope(error=str(exc))
    return ErrorEnvelope(error=failure_message, details=str(exc))


def error_response(exc: AdapterError, failure_message: str) -> JSONResponse:
    """Log *exc* and turn it into a JSON envelope with its status code."""
    if exc.status_code >= 500:
        logger.error("%s: %s", failure_message, exc)
    else:
        logger.info("%s: %s", failure_message, exc)
    envelope = envelope_for(exc, failure_message)
    return JSONResponse(status_code=exc.status_code, content=envelope.model_dump())


async def adapter_error_handler(request: Request, exc: AdapterError) -> JSONResponse:
    """App-level fallback for adapter errors a route did not handle itself."""
    return error_response(exc, GENERIC_FAILURE)
