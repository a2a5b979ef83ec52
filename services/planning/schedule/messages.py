"""Fixed response messages for Schedule service operations."""

from __future__ import annotations

from packages.planner_shared.envelope import OperationMessages

CREATE = OperationMessages(
    success="Schedule created successfully",
    error="There was a problem creating the schedule",
)
FETCH = OperationMessages(
    success="Schedule found",
    error="There was a problem fetching the schedule",
    not_found="Schedule not found",
)
FETCH_ALL = OperationMessages(
    success="Schedules found",
    error="There was a problem fetching the schedules",
)
UPDATE = OperationMessages(
    success="Schedule updated successfully",
    error="There was a problem updating the schedule",
    not_found="Schedule not found",
)
DELETE = OperationMessages(
    success="Schedule deleted successfully",
    error="There was a problem deleting the schedule",
    data_found="Deleting the schedule failed",
)
FETCH_TASKS = OperationMessages(
    success="Tasks found",
    error="There was a problem fetching the tasks",
)
