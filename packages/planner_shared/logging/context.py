"""Context propagation helpers for structured logging.

Fields bound here are attached to every log line emitted from the same
execution context, which covers both threadpool-dispatched sync handlers and
async handlers.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import Iterator, Mapping

_EMPTY: Mapping[str, str] = MappingProxyType({})
_LOG_CONTEXT: ContextVar[Mapping[str, str]] = ContextVar(
    "planner_log_context", default=_EMPTY
)


def get_context() -> dict[str, str]:
    """Return a mutable copy of the current logging context."""
    return dict(_LOG_CONTEXT.get())


def _merged(values: Mapping[str, object]) -> Mapping[str, str]:
    """Return the current context with ``values`` stringified on top.

    ``None`` values are skipped.
    """
    merged = dict(_LOG_CONTEXT.get())
    merged.update({str(k): str(v) for k, v in values.items() if v is not None})
    return MappingProxyType(merged)


def bind_context(**values: object) -> None:
    """Bind values into the current logging context until cleared."""
    if values:
        _LOG_CONTEXT.set(_merged(values))


def clear_context(*keys: str) -> None:
    """Drop the given keys, or every key when none are named."""
    if not keys:
        _LOG_CONTEXT.set(_EMPTY)
        return
    remaining = {k: v for k, v in _LOG_CONTEXT.get().items() if k not in keys}
    _LOG_CONTEXT.set(MappingProxyType(remaining))


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` for the duration of one block only."""
    token = _LOG_CONTEXT.set(_merged(values))
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)
