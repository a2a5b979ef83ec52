"""Composition root wiring settings, store client, services and routes."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from packages.planner_core import health_api
from packages.planner_core.auth import ApiKeyGate, install_api_key_gate
from packages.planner_shared.config import PlannerSettings
from packages.planner_shared.http import create_app
from packages.planner_shared.logging import get_logger
from resources.substrates.supabase import StoreClient
from services.planning.schedule import api as schedule_api
from services.planning.schedule import build_schedule_service
from services.planning.task import api as task_api
from services.planning.task import build_task_service

_LOGGER = get_logger(__name__)

APP_VERSION = "0.1.0"


def build_app(*, settings: PlannerSettings, store: StoreClient) -> FastAPI:
    """Build the Planner FastAPI app around one shared store client.

    The store client is closed when the application shuts down.
    """

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        try:
            yield
        finally:
            store.close()
            _LOGGER.info("store client closed")

    app = create_app(title=settings.http.title, version=APP_VERSION, lifespan=lifespan)
    install_api_key_gate(app, ApiKeyGate(settings=settings.auth))

    router = APIRouter()
    health_api.register_routes(router=router, settings=settings)
    schedule_api.register_routes(
        router=router,
        service=build_schedule_service(settings=settings, store=store),
    )
    task_api.register_routes(
        router=router,
        service=build_task_service(settings=settings, store=store),
    )
    app.include_router(router)
    return app
