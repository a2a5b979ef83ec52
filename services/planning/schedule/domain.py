"""Domain contracts for Schedule service payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from services.planning.task.domain import TaskRecord


class ScheduleRecord(BaseModel):
    """One stored schedule row without its tasks."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    account_id: int
    agent_id: int
    start_time: str
    end_time: str
    created_at: str | None = None


class ScheduleDetail(ScheduleRecord):
    """One stored schedule row with its associated tasks joined in."""

    tasks: list[TaskRecord] = Field(default_factory=list)
