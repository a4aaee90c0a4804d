"""HTTP error helpers shared by the routes."""

import logfire
from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blogcomments.domain.error import StorageError


def storage_failure(error: StorageError, detail: str) -> HTTPException:
    """Log a storage failure and build a generic 500 response.

    The storage message stays in the logs; clients only see ``detail``.

    Args:
        error: The storage error raised by a repository
        detail: Client-facing message

    Returns:
        HTTPException to raise from the route
    """
    logfire.error(
        "Storage failure",
        operation=error.operation,
        error=str(error),
        cause=type(error.__cause__).__name__ if error.__cause__ else None,
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies and parameters as 400.

    Missing fields are handled by the domain; this covers wrong types and
    unparseable JSON so that all bad input shares one status code.
    """
    logfire.warn(
        "Request validation failed",
        path=request.url.path,
        errors=[".".join(str(p) for p in err["loc"]) for err in exc.errors()],
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Datos de la solicitud inválidos"},
    )
