import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """A request could not be served; surfaced to clients as a generic 500."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    cause = exc.__cause__
    logger.error(
        "%s %s: %s (%s)",
        request.method,
        request.url.path,
        exc.message,
        cause if cause is not None else "no cause",
    )
    return JSONResponse(status_code=500, content={"error": exc.message})
