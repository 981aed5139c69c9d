"""JSON envelopes and the exception handlers that produce error envelopes."""
import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stock_quote_api.errors import ApiError
from stock_quote_api.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int) -> JSONResponse:
    body = ErrorResponse(message=message, error_code=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def describe_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Flatten pydantic errors into one readable sentence.

    `("body", "email")` + "value is not a valid email address" becomes
    "email: value is not a valid email address".
    """
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        field = ".".join(loc)
        msg = err.get("msg", "invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return "; ".join(parts) or "Invalid request"


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.message, exc.status_code)


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(describe_validation_errors(exc.errors()), 400)


async def _http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    response = error_response(str(exc.detail), exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """Render all expected failures as `{success: false, message, error_code}`."""
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
