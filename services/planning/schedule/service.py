"""Authoritative in-process Python API for the Schedule service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from packages.planner_shared.config import PlannerSettings
from packages.planner_shared.envelope import Envelope
from resources.substrates.supabase import StoreClient
from services.planning.schedule.domain import ScheduleDetail, ScheduleRecord
from services.planning.schedule.validation import (
    ScheduleCreateRequest,
    ScheduleUpdateRequest,
)
from services.planning.task.domain import TaskRecord


class ScheduleService(ABC):
    """Public API for schedule record operations."""

    @abstractmethod
    def create(self, *, request: ScheduleCreateRequest) -> Envelope[ScheduleDetail]:
        """Persist one new schedule and return it with its (empty) task list."""

    @abstractmethod
    def fetch(self, *, schedule_id: str) -> Envelope[ScheduleDetail]:
        """Read one schedule with its tasks joined in."""

    @abstractmethod
    def fetch_all(self) -> Envelope[list[ScheduleRecord]]:
        """Read every stored schedule without tasks."""

    @abstractmethod
    def update(self, *, request: ScheduleUpdateRequest) -> Envelope[ScheduleDetail]:
        """Replace every mutable field of one existing schedule."""

    @abstractmethod
    def delete(self, *, schedule_id: str) -> Envelope[None]:
        """Delete one schedule (and, through the store, its tasks)."""

    @abstractmethod
    def fetch_tasks(self, *, schedule_id: str) -> Envelope[list[TaskRecord]]:
        """Read every task belonging to one schedule."""


def build_schedule_service(
    *, settings: PlannerSettings, store: StoreClient
) -> ScheduleService:
    """Build default Schedule implementation from typed settings."""
    from services.planning.schedule.config import resolve_schedule_settings
    from services.planning.schedule.implementation import DefaultScheduleService

    return DefaultScheduleService(
        settings=resolve_schedule_settings(settings), store=store
    )
