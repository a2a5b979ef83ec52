"""Exceptions raised while reading an inbound Planner request."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestReadError(Exception):
    """A header or body of the current request could not be read as expected."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class MissingHeaderError(RequestReadError):
    """A required header is absent or blank."""

    header_name: str


@dataclass(frozen=True)
class InvalidBodyError(RequestReadError):
    """The body is not a payload any route accepts; rendered as 400."""


@dataclass(frozen=True)
class InvalidJsonBodyError(InvalidBodyError):
    """The body could not be decoded as JSON."""
