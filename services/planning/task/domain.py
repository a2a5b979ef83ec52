"""Domain contracts for Task service payloads."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class TaskType(StrEnum):
    """Kind of time block a task occupies."""

    BREAK = "break"
    WORK = "work"


class TaskRecord(BaseModel):
    """One stored task row as returned by the remote store."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    account_id: int
    schedule_id: str
    start_time: str
    duration: int
    type: TaskType
    created_at: str | None = None
