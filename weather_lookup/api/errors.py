"""
Translation of service exceptions into HTTP error responses.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from weather_lookup.exceptions import (
    ConfigurationError,
    InvalidInputError,
    UpstreamError,
    WeatherLookupException,
)
from weather_lookup.schemas.common import ErrorResponse
from weather_lookup.utils.logger import setup_logger

logger = setup_logger(__name__)

GENERIC_UPSTREAM_STATUS = 502


def status_for(exc: WeatherLookupException) -> int:
    if isinstance(exc, InvalidInputError):
        return 400
    if isinstance(exc, UpstreamError):
        if exc.status_code and 400 <= exc.status_code < 600:
            return exc.status_code
        return GENERIC_UPSTREAM_STATUS
    return 500


def _error_response(request: Request, status_code: int, error: str, detail: str) -> JSONResponse:
    body = ErrorResponse(
        error=error,
        detail=detail,
        status_code=status_code,
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


async def handle_weather_lookup_exception(
    request: Request, exc: WeatherLookupException
) -> JSONResponse:
    status_code = status_for(exc)
    log = logger.warning if status_code < 500 else logger.error
    log(
        "Weather lookup failed",
        extra={
            "event": "api_error",
            "path": request.url.path,
            "city": request.query_params.get("city"),
            "status_code": status_code,
            "error": exc.message,
            "error_type": type(exc).__name__,
            "request_id": getattr(request.state, "request_id", None),
        },
    )

    if isinstance(exc, ConfigurationError):
        detail = "Server configuration error"
    elif isinstance(exc, UpstreamError):
        detail = "Weather provider request failed"
    else:
        detail = "Invalid request"
    return _error_response(request, status_code, exc.message, detail)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WeatherLookupException, handle_weather_lookup_exception)
