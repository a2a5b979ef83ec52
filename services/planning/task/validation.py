"""Pydantic request-validation models for Task service API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from packages.planner_shared.request_validation import (
    require_timestamp,
    require_uuid,
)
from services.planning.task.domain import TaskType


class _ValidationModel(BaseModel):
    """Base request model accepting camelCase wire names and ignoring extras."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class TaskCreateRequest(_ValidationModel):
    """Validated create-task request shape."""

    account_id: int = Field(alias="accountId", strict=True)
    schedule_id: str = Field(alias="scheduleId")
    start_time: str = Field(alias="startTime")
    duration: int = Field(alias="duration", strict=True, gt=0)
    type: TaskType = Field(alias="type")

    @field_validator("schedule_id")
    @classmethod
    def _validate_schedule_id(cls, value: str) -> str:
        return require_uuid(value)

    @field_validator("start_time")
    @classmethod
    def _validate_start_time(cls, value: str) -> str:
        return require_timestamp(value)


class TaskUpdateRequest(_ValidationModel):
    """Validated update-task request shape; all mutable fields are resent."""

    id: str = Field(alias="id")
    account_id: int = Field(alias="accountId", strict=True)
    schedule_id: str = Field(alias="scheduleId")
    start_time: str = Field(alias="startTime")
    duration: int = Field(alias="duration", strict=True, gt=0)
    type: TaskType = Field(alias="type")

    @field_validator("id", "schedule_id")
    @classmethod
    def _validate_uuid(cls, value: str) -> str:
        return require_uuid(value)

    @field_validator("start_time")
    @classmethod
    def _validate_start_time(cls, value: str) -> str:
        return require_timestamp(value)


class TaskKeyRequest(_ValidationModel):
    """Validated request shape for operations keyed by task id."""

    id: str

    @field_validator("id")
    @classmethod
    def _validate_id(cls, value: str) -> str:
        return require_uuid(value)
