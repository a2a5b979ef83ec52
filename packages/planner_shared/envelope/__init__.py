"""Public shared envelope API for Planner services."""

from .builders import failure, soft_failure, success
from .envelope import Envelope
from .messages import OperationMessages

__all__ = [
    "Envelope",
    "OperationMessages",
    "failure",
    "soft_failure",
    "success",
]
