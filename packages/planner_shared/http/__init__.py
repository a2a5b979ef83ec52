"""Public shared HTTP API for internal Planner packages."""

from .errors import (
    InvalidBodyError,
    InvalidJsonBodyError,
    MissingHeaderError,
    RequestReadError,
)
from .server import (
    create_app,
    error_body,
    error_status,
    get_header,
    read_json_body,
    read_raw_body,
    render_envelope,
    render_errors,
    run_app,
)

__all__ = [
    "InvalidBodyError",
    "InvalidJsonBodyError",
    "MissingHeaderError",
    "RequestReadError",
    "create_app",
    "error_body",
    "error_status",
    "get_header",
    "read_json_body",
    "read_raw_body",
    "render_envelope",
    "render_errors",
    "run_app",
]
