"""FastAPI and uvicorn helpers for Planner HTTP handling."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from http import HTTPStatus
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from packages.planner_shared.envelope import Envelope
from packages.planner_shared.errors import ErrorCategory, ErrorDetail, internal_error
from packages.planner_shared.logging import fields, get_logger, log_context

from .errors import InvalidBodyError, InvalidJsonBodyError, MissingHeaderError

_LOGGER = get_logger(__name__)


def create_app(
    *,
    title: str = "planner",
    version: str = "0.0.0",
    lifespan: Callable[[FastAPI], Any] | None = None,
) -> FastAPI:
    """Create a FastAPI app whose failures all render the JSON error body."""
    app = FastAPI(title=title, version=version, lifespan=lifespan)
    app.add_exception_handler(InvalidBodyError, _invalid_body_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
    return app


def run_app(
    app: FastAPI,
    *,
    host: str = "127.0.0.1",
    port: int = 3000,
    log_level: str = "info",
) -> None:
    """Run one FastAPI app through uvicorn."""
    uvicorn.run(app, host=host, port=port, log_level=log_level)


def get_header(
    request: Request,
    name: str,
    *,
    required: bool = True,
    strip: bool = True,
) -> str | None:
    """Fetch one header value (case-insensitive) and optionally enforce presence."""
    value = request.headers.get(name)
    if value is None:
        if required:
            raise MissingHeaderError(
                message=f"Missing required header: {name}",
                header_name=name,
            )
        return None

    if strip:
        value = value.strip()
    if required and value == "":
        raise MissingHeaderError(
            message=f"Missing required header: {name}",
            header_name=name,
        )
    return value


async def read_raw_body(request: Request) -> bytes:
    """Read raw request body bytes without interpretation."""
    return await request.body()


async def read_json_body(request: Request) -> Any:
    """Read and decode one request body as JSON."""
    body = await read_raw_body(request)
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonBodyError(message="Body is not valid JSON") from exc


def render_envelope(
    envelope: Envelope[Any], *, status_code: int = HTTPStatus.OK
) -> JSONResponse:
    """Render one service envelope, converting carried errors to an error response."""
    if not envelope.ok:
        return render_errors(envelope.errors)
    return JSONResponse(status_code=int(status_code), content=envelope.to_body())


def render_errors(errors: Sequence[ErrorDetail]) -> JSONResponse:
    """Render structured errors as one HTTP error body."""
    status = error_status(errors[0].category) if errors else HTTPStatus.INTERNAL_SERVER_ERROR
    return JSONResponse(
        status_code=int(status),
        content=error_body(status=status, errors=errors),
    )


def error_body(
    *, status: HTTPStatus, errors: Sequence[ErrorDetail]
) -> dict[str, object]:
    """Build the wire error body for one status and error list.

    Validation failures list every constraint message; other categories carry
    the first error message as a plain string.
    """
    message: str | list[str]
    if status == HTTPStatus.BAD_REQUEST:
        message = [error.message for error in errors]
    elif errors:
        message = errors[0].message
    else:
        message = status.phrase
    return {"statusCode": int(status), "message": message, "error": status.phrase}


def error_status(category: ErrorCategory) -> HTTPStatus:
    """Map one envelope error category to its HTTP status."""
    if category == ErrorCategory.VALIDATION:
        return HTTPStatus.BAD_REQUEST
    if category == ErrorCategory.NOT_FOUND:
        return HTTPStatus.NOT_FOUND
    return HTTPStatus.INTERNAL_SERVER_ERROR


async def _invalid_body_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render unreadable request bodies as 400 responses."""
    del request
    status = HTTPStatus.BAD_REQUEST
    return JSONResponse(
        status_code=int(status),
        content={"statusCode": int(status), "message": [str(exc)], "error": status.phrase},
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any exception no route handled as a 500 error body."""
    with log_context(
        {fields.HTTP_METHOD: request.method, fields.HTTP_PATH: request.url.path}
    ):
        _LOGGER.error("unhandled request failure", exc_info=exc)
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    return JSONResponse(
        status_code=int(status),
        content=error_body(status=status, errors=[internal_error(status.phrase)]),
    )
