"""Pydantic settings for Task service behavior."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from packages.planner_shared.config import PlannerSettings, resolve_component_settings
from services.planning.task.component import SERVICE_COMPONENT_ID


class TaskServiceSettings(BaseModel):
    """Task service store mapping settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    table: str = "task"


def resolve_task_settings(settings: PlannerSettings) -> TaskServiceSettings:
    """Resolve Task settings from ``components.service.task``."""
    return resolve_component_settings(
        settings=settings,
        component_id=SERVICE_COMPONENT_ID,
        model=TaskServiceSettings,
    )
