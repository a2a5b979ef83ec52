"""Pydantic request-validation models for Schedule service API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from packages.planner_shared.request_validation import (
    require_timestamp,
    require_uuid,
)


class _ValidationModel(BaseModel):
    """Base request model accepting camelCase wire names and ignoring extras."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class ScheduleCreateRequest(_ValidationModel):
    """Validated create-schedule request shape."""

    account_id: int = Field(alias="accountId", strict=True)
    agent_id: int = Field(alias="agentId", strict=True)
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")

    @field_validator("start_time", "end_time")
    @classmethod
    def _validate_timestamps(cls, value: str) -> str:
        return require_timestamp(value)


class ScheduleUpdateRequest(_ValidationModel):
    """Validated update-schedule request shape; all mutable fields are resent."""

    id: str = Field(alias="id")
    account_id: int = Field(alias="accountId", strict=True)
    agent_id: int = Field(alias="agentId", strict=True)
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")

    @field_validator("id")
    @classmethod
    def _validate_id(cls, value: str) -> str:
        return require_uuid(value)

    @field_validator("start_time", "end_time")
    @classmethod
    def _validate_timestamps(cls, value: str) -> str:
        return require_timestamp(value)


class ScheduleKeyRequest(_ValidationModel):
    """Validated request shape for operations keyed by schedule id."""

    id: str

    @field_validator("id")
    @classmethod
    def _validate_id(cls, value: str) -> str:
        return require_uuid(value)
