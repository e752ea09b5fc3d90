"""
Error taxonomy for the cats API and the FastAPI handlers that turn it
into HTTP responses.

Every error carries a machine readable ``code`` and is rendered as::

    {"detail": "Human-readable error message", "code": "NOT_FOUND"}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class CatsError(Exception):
    """Base class for every error raised by the cats core."""

    code = "CATS_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidCatRequest(CatsError):
    code = "INVALID_REQUEST"


class CatNotFound(CatsError):
    code = "NOT_FOUND"

    def __init__(self, cat_id: str):
        super().__init__(f"Cat {cat_id} not found")
        self.cat_id = cat_id


class EnrichmentUnavailable(CatsError):
    """The cataas.com lookup failed (network, status or payload)."""

    code = "ENRICHMENT_UNAVAILABLE"


class StoreUnavailable(CatsError):
    """The underlying document store could not complete an operation."""

    code = "STORE_UNAVAILABLE"


ERROR_TO_STATUS = {
    InvalidCatRequest: status.HTTP_400_BAD_REQUEST,
    CatNotFound: status.HTTP_404_NOT_FOUND,
    EnrichmentUnavailable: status.HTTP_502_BAD_GATEWAY,
    StoreUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc: CatsError) -> int:
    for error_type, status_code in ERROR_TO_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def cats_error_handler(request: Request, exc: CatsError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.warning(
            "%s %s failed with %s: %s",
            request.method,
            request.url.path,
            exc.code,
            exc.message,
        )
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.code},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatsError, cats_error_handler)
