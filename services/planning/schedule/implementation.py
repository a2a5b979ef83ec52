"""Concrete Schedule service implementation over the remote store."""

from __future__ import annotations

from packages.planner_shared.envelope import Envelope, failure, success
from packages.planner_shared.errors import (
    ErrorDetail,
    codes,
    internal_error,
    not_found_error,
)
from packages.planner_shared.logging import get_logger, public_api_logged
from resources.substrates.supabase import StoreClient, StoreResult, embed_columns
from services.planning.schedule import messages
from services.planning.schedule.component import SERVICE_COMPONENT_ID
from services.planning.schedule.config import ScheduleServiceSettings
from services.planning.schedule.domain import ScheduleDetail, ScheduleRecord
from services.planning.schedule.service import ScheduleService
from services.planning.schedule.validation import (
    ScheduleCreateRequest,
    ScheduleUpdateRequest,
)
from services.planning.task.domain import TaskRecord

_LOGGER = get_logger(__name__)


class DefaultScheduleService(ScheduleService):
    """Default Schedule implementation reading tasks through a store join."""

    def __init__(
        self, *, settings: ScheduleServiceSettings, store: StoreClient
    ) -> None:
        self._settings = settings
        self._store = store
        self._detail_columns = embed_columns(settings.tasks_alias, settings.task_table)

    @public_api_logged(logger=_LOGGER, component_id=SERVICE_COMPONENT_ID)
    def create(self, *, request: ScheduleCreateRequest) -> Envelope[ScheduleDetail]:
        """Insert one schedule and return the stored row with joined tasks."""
        result = self._store.insert(
            table=self._settings.table,
            row=_columns(request),
            columns=self._detail_columns,
        )
        if not result.ok or result.first is None:
            return _internal(messages.CREATE.error, result)
        return success(
            message=messages.CREATE.success,
            data=self._detail(result.first),
        )

    @public_api_logged(
        logger=_LOGGER, component_id=SERVICE_COMPONENT_ID, id_fields=("schedule_id",)
    )
    def fetch(self, *, schedule_id: str) -> Envelope[ScheduleDetail]:
        """Read one schedule with its tasks."""
        result = self._select_detail(schedule_id)
        if not result.ok:
            return _internal(messages.FETCH.error, result)
        if result.first is None:
            return _not_found(messages.FETCH.not_found, schedule_id=schedule_id)
        return success(
            message=messages.FETCH.success,
            data=self._detail(result.first),
        )

    @public_api_logged(logger=_LOGGER, component_id=SERVICE_COMPONENT_ID)
    def fetch_all(self) -> Envelope[list[ScheduleRecord]]:
        """Read every schedule in store order."""
        result = self._store.select(table=self._settings.table)
        if not result.ok:
            return _internal(messages.FETCH_ALL.error, result)
        return success(
            message=messages.FETCH_ALL.success,
            data=[ScheduleRecord.model_validate(row) for row in result.data],
        )

    @public_api_logged(
        logger=_LOGGER, component_id=SERVICE_COMPONENT_ID, id_fields=("id",)
    )
    def update(self, *, request: ScheduleUpdateRequest) -> Envelope[ScheduleDetail]:
        """Replace all mutable columns of one schedule that must already exist."""
        existing = self._select_detail(request.id)
        if not existing.ok:
            return _internal(messages.UPDATE.error, existing)
        if existing.first is None:
            return _not_found(messages.UPDATE.not_found, schedule_id=request.id)

        result = self._store.update(
            table=self._settings.table,
            values=_columns(request),
            filters={"id": request.id},
            columns=self._detail_columns,
        )
        if not result.ok:
            return _internal(messages.UPDATE.error, result)
        if result.first is None:
            return _not_found(messages.UPDATE.not_found, schedule_id=request.id)
        return success(
            message=messages.UPDATE.success,
            data=self._detail(result.first),
        )

    @public_api_logged(
        logger=_LOGGER, component_id=SERVICE_COMPONENT_ID, id_fields=("schedule_id",)
    )
    def delete(self, *, schedule_id: str) -> Envelope[None]:
        """Delete one schedule, then confirm it is gone."""
        result = self._store.delete(
            table=self._settings.table, filters={"id": schedule_id}
        )
        if not result.ok:
            return _internal(messages.DELETE.error, result)

        remaining = self._store.select(
            table=self._settings.table, filters={"id": schedule_id}
        )
        if not remaining.ok:
            return _internal(messages.DELETE.error, remaining)
        if remaining.first is not None:
            return failure(
                message=messages.DELETE.data_found,
                errors=[
                    internal_error(
                        messages.DELETE.data_found,
                        code=codes.DELETE_NOT_APPLIED,
                        metadata={"schedule_id": schedule_id},
                    )
                ],
            )
        return success(message=messages.DELETE.success)

    @public_api_logged(
        logger=_LOGGER, component_id=SERVICE_COMPONENT_ID, id_fields=("schedule_id",)
    )
    def fetch_tasks(self, *, schedule_id: str) -> Envelope[list[TaskRecord]]:
        """Read every task whose ``schedule_id`` matches."""
        result = self._store.select(
            table=self._settings.task_table, filters={"schedule_id": schedule_id}
        )
        if not result.ok:
            return _internal(messages.FETCH_TASKS.error, result)
        return success(
            message=messages.FETCH_TASKS.success,
            data=[TaskRecord.model_validate(row) for row in result.data],
        )

    def _select_detail(self, schedule_id: str) -> StoreResult:
        return self._store.select(
            table=self._settings.table,
            columns=self._detail_columns,
            filters={"id": schedule_id},
        )

    def _detail(self, row: dict[str, object]) -> ScheduleDetail:
        """Map one joined row, reading tasks from the configured embed alias."""
        values = dict(row)
        values["tasks"] = values.pop(self._settings.tasks_alias, None) or []
        return ScheduleDetail.model_validate(values)


def _columns(
    request: ScheduleCreateRequest | ScheduleUpdateRequest,
) -> dict[str, object]:
    """Map one validated request onto store columns, excluding the id."""
    return {
        "account_id": request.account_id,
        "agent_id": request.agent_id,
        "start_time": request.start_time,
        "end_time": request.end_time,
    }


def _not_found(message: str, *, schedule_id: str) -> Envelope:
    return failure(
        message=message,
        errors=[
            not_found_error(
                message,
                code=codes.RESOURCE_NOT_FOUND,
                metadata={"schedule_id": schedule_id},
            )
        ],
    )


def _internal(message: str, result: StoreResult) -> Envelope:
    """Build one failed envelope carrying the store's own error summary."""
    return failure(message=message, errors=[_store_failure(message, result)])


def _store_failure(message: str, result: StoreResult) -> ErrorDetail:
    metadata: dict[str, str] = {}
    if result.error is not None:
        metadata = {
            "store_message": result.error.message,
            "store_code": result.error.code,
        }
    return internal_error(message, code=codes.DEPENDENCY_FAILURE, metadata=metadata)
