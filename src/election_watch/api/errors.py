"""Exception handlers rendering every failure as an error envelope.

Failures are logged here, once, and nowhere else on the request path.
Log lines carry the request path only: query strings hold caller
addresses and are never logged.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from election_watch.lib.civic.errors import CivicProviderError, ProviderConfigurationError
from election_watch.schemas.common import ErrorEnvelope

CONFIGURATION_ERROR_MESSAGE = "Election data provider is not configured"


class MissingParameterError(ValueError):
    """A required query parameter was absent or blank.

    Args:
        parameter: Name of the missing parameter.
    """

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"{parameter.capitalize()} parameter is required")


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error envelope response."""
    return JSONResponse(status_code=status_code, content=ErrorEnvelope(error=message).model_dump())


async def missing_parameter_handler(request: Request, exc: MissingParameterError) -> JSONResponse:
    logger.warning("Rejected {} request: missing {!r} parameter", request.url.path, exc.parameter)
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def civic_provider_error_handler(request: Request, exc: CivicProviderError) -> JSONResponse:
    if isinstance(exc, ProviderConfigurationError):
        logger.error("Civic provider not configured while serving {}: {}", request.url.path, exc.message)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, CONFIGURATION_ERROR_MESSAGE)

    logger.error(
        "Civic provider failure while serving {}: {} (status={})",
        request.url.path,
        exc,
        exc.status_code,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "query")
    message = first.get("msg", "Invalid request")
    logger.warning("Rejected {} request: invalid {}", request.url.path, location or "input")
    return error_response(status.HTTP_400_BAD_REQUEST, f"Invalid {location}: {message}" if location else message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while serving {}", request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Register the envelope-rendering exception handlers on ``app``.

    Args:
        app: The FastAPI application.
    """
    app.add_exception_handler(MissingParameterError, missing_parameter_handler)  # type: ignore[arg-type]
    app.add_exception_handler(CivicProviderError, civic_provider_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
