"""Task service native package exports."""

from services.planning.task.config import TaskServiceSettings
from services.planning.task.domain import TaskRecord, TaskType
from services.planning.task.implementation import DefaultTaskService
from services.planning.task.service import TaskService, build_task_service

__all__ = [
    "DefaultTaskService",
    "TaskRecord",
    "TaskService",
    "TaskServiceSettings",
    "TaskType",
    "build_task_service",
]
