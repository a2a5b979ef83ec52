"""Process entrypoint for the Planner HTTP API."""

from __future__ import annotations

import os
from pathlib import Path

from packages.planner_core.app import build_app
from packages.planner_shared.config import load_settings
from packages.planner_shared.http import run_app
from packages.planner_shared.logging import configure_logging, get_logger, log_context
from resources.substrates.supabase import SupabaseClientSubstrate

_LOGGER = get_logger(__name__)


def main() -> None:
    """Load settings, wire the store client and serve HTTP until stopped."""
    config_path = os.getenv("PLANNER_CONFIG_FILE", "").strip()
    settings = load_settings(config_path=Path(config_path) if config_path else None)
    configure_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
        service=settings.logging.service,
        environment=settings.logging.environment,
    )
    if not settings.auth.permissible_keys():
        _LOGGER.warning("no api key configured; protected routes will reject every request")

    store = SupabaseClientSubstrate.from_settings(settings.supabase)
    app = build_app(settings=settings, store=store)
    with log_context({"host": settings.http.host, "port": settings.http.port}):
        _LOGGER.info("planner HTTP runtime starting")
    run_app(
        app,
        host=settings.http.host,
        port=settings.http.port,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
