"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI/init params
2) ``PLANNER_``-prefixed environment variables (``__`` nests keys)
3) Deployment environment variables (``API_KEY``, ``SUPABASE_*``)
4) ``~/.config/planner/planner.yaml`` (or an explicit path)
5) Model defaults

Example: ``PLANNER_LOGGING__LEVEL=DEBUG`` -> ``logging.level = "DEBUG"``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from .models import _CONFIG_PATH, PlannerSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> PlannerSettings:
    """Load typed settings using the standard Planner precedence cascade."""
    token = None
    if config_path is not None:
        token = _CONFIG_PATH.set(Path(config_path))
    try:
        return PlannerSettings(**dict(cli_params or {}))
    finally:
        if token is not None:
            _CONFIG_PATH.reset(token)
