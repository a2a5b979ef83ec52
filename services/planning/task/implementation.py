"""Concrete Task service implementation over the remote store."""

from __future__ import annotations

from packages.planner_shared.envelope import (
    Envelope,
    failure,
    soft_failure,
    success,
)
from packages.planner_shared.errors import (
    ErrorDetail,
    codes,
    internal_error,
    not_found_error,
)
from packages.planner_shared.logging import get_logger, public_api_logged
from resources.substrates.supabase import StoreClient, StoreResult
from services.planning.task import messages
from services.planning.task.component import SERVICE_COMPONENT_ID
from services.planning.task.config import TaskServiceSettings
from services.planning.task.domain import TaskRecord
from services.planning.task.service import TaskService
from services.planning.task.validation import TaskCreateRequest, TaskUpdateRequest

_LOGGER = get_logger(__name__)


class DefaultTaskService(TaskService):
    """Default Task implementation issuing single-table store calls."""

    def __init__(self, *, settings: TaskServiceSettings, store: StoreClient) -> None:
        self._settings = settings
        self._store = store

    @public_api_logged(logger=_LOGGER, component_id=SERVICE_COMPONENT_ID)
    def create(self, *, request: TaskCreateRequest) -> Envelope[TaskRecord]:
        """Insert one task.

        Store failures are reported through ``success: false`` rather than an
        error, so callers still receive a created-status response.
        """
        result = self._store.insert(table=self._settings.table, row=_columns(request))
        if not result.ok or result.first is None:
            return soft_failure(message=messages.CREATE.error)
        return success(
            message=messages.CREATE.success,
            data=TaskRecord.model_validate(result.first),
        )

    @public_api_logged(
        logger=_LOGGER, component_id=SERVICE_COMPONENT_ID, id_fields=("task_id",)
    )
    def fetch(self, *, task_id: str) -> Envelope[TaskRecord]:
        """Read one task; store failures and missing rows both read as not found."""
        result = self._store.select(table=self._settings.table, filters={"id": task_id})
        if not result.ok or result.first is None:
            return failure(
                message=messages.FETCH.not_found,
                errors=[_not_found(messages.FETCH.not_found, task_id=task_id)],
            )
        return success(
            message=messages.FETCH.success,
            data=TaskRecord.model_validate(result.first),
        )

    @public_api_logged(logger=_LOGGER, component_id=SERVICE_COMPONENT_ID)
    def fetch_all(self) -> Envelope[list[TaskRecord]]:
        """Read every task row without scoping."""
        result = self._store.select(table=self._settings.table)
        if not result.ok:
            return failure(
                message=messages.FETCH_ALL.error,
                errors=[_store_failure(messages.FETCH_ALL.error, result)],
            )
        return success(
            message=messages.FETCH_ALL.success,
            data=[TaskRecord.model_validate(row) for row in result.data],
        )

    @public_api_logged(
        logger=_LOGGER, component_id=SERVICE_COMPONENT_ID, id_fields=("id",)
    )
    def update(self, *, request: TaskUpdateRequest) -> Envelope[TaskRecord]:
        """Replace all mutable columns of one task that must already exist."""
        existing = self.fetch(task_id=request.id)
        if not existing.ok:
            return existing

        result = self._store.update(
            table=self._settings.table,
            values=_columns(request),
            filters={"id": request.id},
        )
        if not result.ok:
            return failure(
                message=messages.UPDATE.error,
                errors=[_store_failure(messages.UPDATE.error, result)],
            )
        if result.first is None:
            return failure(
                message=messages.FETCH.not_found,
                errors=[_not_found(messages.FETCH.not_found, task_id=request.id)],
            )
        return success(
            message=messages.UPDATE.success,
            data=TaskRecord.model_validate(result.first),
        )

    @public_api_logged(
        logger=_LOGGER, component_id=SERVICE_COMPONENT_ID, id_fields=("task_id",)
    )
    def delete(self, *, task_id: str) -> Envelope[None]:
        """Delete one task that must already exist."""
        existing = self.fetch(task_id=task_id)
        if not existing.ok:
            return failure(message=existing.message, errors=existing.errors)

        result = self._store.delete(table=self._settings.table, filters={"id": task_id})
        if not result.ok:
            return failure(
                message=messages.DELETE.error,
                errors=[_store_failure(messages.DELETE.error, result)],
            )
        return success(message=messages.DELETE.success)


def _columns(request: TaskCreateRequest | TaskUpdateRequest) -> dict[str, object]:
    """Map one validated request onto store columns, excluding the id."""
    return {
        "account_id": request.account_id,
        "schedule_id": request.schedule_id,
        "start_time": request.start_time,
        "duration": request.duration,
        "type": request.type.value,
    }


def _not_found(message: str, *, task_id: str) -> ErrorDetail:
    return not_found_error(
        message, code=codes.RESOURCE_NOT_FOUND, metadata={"task_id": task_id}
    )


def _store_failure(message: str, result: StoreResult) -> ErrorDetail:
    """Build one internal error carrying the store's own error summary."""
    metadata: dict[str, str] = {}
    if result.error is not None:
        metadata = {
            "store_message": result.error.message,
            "store_code": result.error.code,
        }
    return internal_error(message, code=codes.DEPENDENCY_FAILURE, metadata=metadata)
