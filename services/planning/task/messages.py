"""Fixed response messages for Task service operations."""

from __future__ import annotations

from packages.planner_shared.envelope import OperationMessages

CREATE = OperationMessages(
    success="Task created successfully",
    error="There was a problem creating the task",
)
FETCH = OperationMessages(
    success="Task found",
    error="There was a problem fetching the task",
    not_found="Task not found",
)
FETCH_ALL = OperationMessages(
    success="Tasks found",
    error="There was a problem fetching the tasks",
)
UPDATE = OperationMessages(
    success="Task updated successfully",
    error="There was a problem updating the task",
)
DELETE = OperationMessages(
    success="Task deleted successfully",
    error="There was a problem deleting the task",
    not_found="Task not found",
)
