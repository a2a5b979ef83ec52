"""Pydantic settings for Schedule service behavior."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from packages.planner_shared.config import PlannerSettings, resolve_component_settings
from services.planning.schedule.component import SERVICE_COMPONENT_ID


class ScheduleServiceSettings(BaseModel):
    """Schedule service store mapping settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    table: str = "schedule"
    task_table: str = "task"
    tasks_alias: str = "tasks"


def resolve_schedule_settings(settings: PlannerSettings) -> ScheduleServiceSettings:
    """Resolve Schedule settings from ``components.service.schedule``."""
    return resolve_component_settings(
        settings=settings,
        component_id=SERVICE_COMPONENT_ID,
        model=ScheduleServiceSettings,
    )
