"""HTTP route registration for the Schedule service."""

from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool

from packages.planner_shared.http import read_json_body, render_envelope, render_errors
from packages.planner_shared.request_validation import validate_request, violation_errors
from services.planning.schedule.service import ScheduleService
from services.planning.schedule.validation import (
    ScheduleCreateRequest,
    ScheduleKeyRequest,
    ScheduleUpdateRequest,
)


def register_routes(*, router: APIRouter, service: ScheduleService) -> None:
    """Register ``/schedule`` routes backed by one Schedule service instance.

    ``/schedule/all`` is registered ahead of ``/schedule/{id}`` so the literal
    path wins.
    """

    @router.post("/schedule")
    async def create_schedule(request: Request) -> JSONResponse:
        payload, violations = validate_request(
            ScheduleCreateRequest, await read_json_body(request)
        )
        if payload is None:
            return render_errors(violation_errors(violations))
        result = await run_in_threadpool(service.create, request=payload)
        return render_envelope(result, status_code=HTTPStatus.CREATED)

    @router.get("/schedule/all")
    def fetch_all_schedules() -> JSONResponse:
        return render_envelope(service.fetch_all())

    @router.get("/schedule/{id}")
    def fetch_schedule(id: str) -> JSONResponse:
        key, violations = validate_request(ScheduleKeyRequest, {"id": id})
        if key is None:
            return render_errors(violation_errors(violations))
        return render_envelope(service.fetch(schedule_id=key.id))

    @router.get("/schedule/{id}/tasks")
    def fetch_schedule_tasks(id: str) -> JSONResponse:
        key, violations = validate_request(ScheduleKeyRequest, {"id": id})
        if key is None:
            return render_errors(violation_errors(violations))
        return render_envelope(service.fetch_tasks(schedule_id=key.id))

    @router.put("/schedule")
    async def update_schedule(request: Request) -> JSONResponse:
        payload, violations = validate_request(
            ScheduleUpdateRequest, await read_json_body(request)
        )
        if payload is None:
            return render_errors(violation_errors(violations))
        result = await run_in_threadpool(service.update, request=payload)
        return render_envelope(result)

    @router.delete("/schedule/{id}")
    def delete_schedule(id: str) -> JSONResponse:
        key, violations = validate_request(ScheduleKeyRequest, {"id": id})
        if key is None:
            return render_errors(violation_errors(violations))
        return render_envelope(service.delete(schedule_id=key.id))
