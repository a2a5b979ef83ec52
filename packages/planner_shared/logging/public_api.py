"""Entry and exit logging for service methods exposed to the HTTP layer.

A decorated method logs one ``public_api_invocation`` record before it runs
and one ``public_api_completion`` record after it returns or raises. The
completion record is a warning whenever the returned envelope is unsuccessful.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import wraps
from logging import INFO, WARNING, Logger
from time import perf_counter
from typing import Any, Callable

from . import fields
from .context import log_context


def public_api_logged(
    *,
    logger: Logger,
    component_id: str,
    api_name: str | None = None,
    id_fields: tuple[str, ...] = (),
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Wrap one service method with invocation and completion records.

    ``id_fields`` names keyword arguments, or attributes of a ``request``
    keyword argument, whose values are attached to both records.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        name = api_name or func.__name__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            base = {
                fields.COMPONENT_ID: component_id,
                fields.API_NAME: name,
                **_identifiers(kwargs, id_fields),
            }
            with log_context({**base, fields.EVENT: fields.PUBLIC_API_INVOCATION_EVENT}):
                logger.info("Public API invocation")

            started = perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                _completed(logger, base, started, ok=False, errors=[f"{type(exc).__name__}: {exc}"])
                raise
            ok, errors = _outcome(result)
            _completed(logger, base, started, ok=ok, errors=errors)
            return result

        return wrapper

    return decorator


def _identifiers(kwargs: Mapping[str, Any], names: tuple[str, ...]) -> dict[str, str]:
    request = kwargs.get("request")
    found: dict[str, str] = {}
    for name in names:
        value = kwargs[name] if name in kwargs else getattr(request, name, None)
        if value is not None and value != "":
            found[name] = str(value)
    return found


def _outcome(result: object) -> tuple[bool, list[str]]:
    """Read success and ``code: message`` summaries off an envelope."""
    summaries = []
    for error in getattr(result, "errors", None) or []:
        message = getattr(error, "message", "")
        if not message:
            continue
        code = getattr(error, "code", "")
        summaries.append(f"{code}: {message}" if code else str(message))
    succeeded = getattr(result, "success", None)
    if isinstance(succeeded, bool):
        return succeeded and not summaries, summaries
    return not summaries, summaries


def _completed(
    logger: Logger,
    base: Mapping[str, object],
    started: float,
    *,
    ok: bool,
    errors: list[str],
) -> None:
    record = {
        **base,
        fields.EVENT: fields.PUBLIC_API_COMPLETION_EVENT,
        fields.SUCCESS: ok,
        fields.DURATION_MS: round((perf_counter() - started) * 1000.0, 3),
        fields.ERRORS: errors,
    }
    with log_context(record):
        logger.log(INFO if ok else WARNING, "Public API completion")
