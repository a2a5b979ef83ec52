"""Public API for the Planner process composition root."""

from packages.planner_core.app import APP_VERSION, build_app
from packages.planner_core.auth import ApiKeyGate, install_api_key_gate

__all__ = [
    "APP_VERSION",
    "ApiKeyGate",
    "build_app",
    "install_api_key_gate",
]
