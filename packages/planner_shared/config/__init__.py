"""Public API for shared Planner configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    DEPLOYMENT_ENV_ALIASES,
    AuthSettings,
    ComponentsSettings,
    HttpSettings,
    LoggingSettings,
    PlannerSettings,
    SupabaseSettings,
    resolve_component_settings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEPLOYMENT_ENV_ALIASES",
    "AuthSettings",
    "ComponentsSettings",
    "HttpSettings",
    "LoggingSettings",
    "PlannerSettings",
    "SupabaseSettings",
    "load_settings",
    "resolve_component_settings",
]
