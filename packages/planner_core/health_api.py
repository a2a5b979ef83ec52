"""HTTP readiness route for the Planner process."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from packages.planner_shared.config import PlannerSettings
from packages.planner_shared.envelope import success
from packages.planner_shared.http import render_envelope


class HealthStatus(BaseModel):
    """Process readiness payload; the remote store is not contacted."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    service: str
    environment: str
    ready: bool


def register_routes(*, router: APIRouter, settings: PlannerSettings) -> None:
    """Register the unauthenticated ``/health`` route."""
    status = HealthStatus(
        service=settings.logging.service,
        environment=settings.logging.environment,
        ready=True,
    )

    @router.get("/health")
    def health() -> JSONResponse:
        return render_envelope(success(message="Service ready", data=status))
