"""API error type and handler

Use case errors are rendered as {"error": {"code": ..., "message": ...}}.
Unexpected failures (codes ending in _FAILED) become a 500 and their raw
reason is written to the log instead of the response.
"""

import logging
from fastapi import Request, status
from fastapi.responses import JSONResponse
from sales_engine.libs.result import Error

logger = logging.getLogger(__name__)

# Status codes for use case error codes; anything else is a 400
ERROR_STATUS_CODES = {
    "DOCUMENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_DOCUMENT_TYPE": status.HTTP_400_BAD_REQUEST,
    "INVALID_STATE_TRANSITION": status.HTTP_409_CONFLICT,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
}

UNEXPECTED_ERROR_SUFFIX = "_FAILED"
INTERNAL_ERROR_REASON = "Unexpected server error"


def status_code_for(code: str) -> int:
    if code in ERROR_STATUS_CODES:
        return ERROR_STATUS_CODES[code]
    if code.endswith(UNEXPECTED_ERROR_SUFFIX):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = None):
        self.error = error
        if status_code is None:
            status_code = status_code_for(error.code)
        self.status_code = status_code
        super().__init__(error.message)


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    reason = exc.error.reason
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed with {exc.error.code}: {reason}")
        reason = INTERNAL_ERROR_REASON

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": exc.error.code,
                "message": exc.error.message,
                "reason": reason,
            }
        },
    )
