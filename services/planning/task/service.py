"""Authoritative in-process Python API for the Task service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from packages.planner_shared.config import PlannerSettings
from packages.planner_shared.envelope import Envelope
from resources.substrates.supabase import StoreClient
from services.planning.task.domain import TaskRecord
from services.planning.task.validation import TaskCreateRequest, TaskUpdateRequest


class TaskService(ABC):
    """Public API for task record operations."""

    @abstractmethod
    def create(self, *, request: TaskCreateRequest) -> Envelope[TaskRecord]:
        """Persist one new task."""

    @abstractmethod
    def fetch(self, *, task_id: str) -> Envelope[TaskRecord]:
        """Read one task by id."""

    @abstractmethod
    def fetch_all(self) -> Envelope[list[TaskRecord]]:
        """Read every stored task."""

    @abstractmethod
    def update(self, *, request: TaskUpdateRequest) -> Envelope[TaskRecord]:
        """Replace every mutable field of one existing task."""

    @abstractmethod
    def delete(self, *, task_id: str) -> Envelope[None]:
        """Delete one existing task."""


def build_task_service(
    *, settings: PlannerSettings, store: StoreClient
) -> TaskService:
    """Build default Task implementation from typed settings."""
    from services.planning.task.config import resolve_task_settings
    from services.planning.task.implementation import DefaultTaskService

    return DefaultTaskService(settings=resolve_task_settings(settings), store=store)
