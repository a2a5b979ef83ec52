"""Convenience constructors for typed envelope responses."""

from __future__ import annotations

from typing import Iterable, TypeVar

from packages.planner_shared.errors import ErrorDetail

from .envelope import Envelope


T = TypeVar("T")


def success(*, message: str, data: T | None = None) -> Envelope[T]:
    """Build a successful envelope with data and no errors."""
    return Envelope[T](success=True, message=message, data=data, errors=[])


def failure(*, message: str, errors: Iterable[ErrorDetail]) -> Envelope[T]:
    """Build a failed envelope carrying one or more errors."""
    return Envelope[T](success=False, message=message, data=None, errors=list(errors))


def soft_failure(*, message: str) -> Envelope[T]:
    """Build an unsuccessful envelope that is still delivered as a normal response.

    No errors are attached, so the HTTP boundary keeps the route's success
    status and the caller reads ``success: false`` from the body.
    """
    return Envelope[T](success=False, message=message, data=None, errors=[])
