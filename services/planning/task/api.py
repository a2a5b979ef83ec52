"""HTTP route registration for the Task service."""

from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool

from packages.planner_shared.http import read_json_body, render_envelope, render_errors
from packages.planner_shared.request_validation import validate_request, violation_errors
from services.planning.task.service import TaskService
from services.planning.task.validation import (
    TaskCreateRequest,
    TaskKeyRequest,
    TaskUpdateRequest,
)


def register_routes(*, router: APIRouter, service: TaskService) -> None:
    """Register ``/task`` routes backed by one Task service instance."""

    @router.post("/task")
    async def create_task(request: Request) -> JSONResponse:
        payload, violations = validate_request(
            TaskCreateRequest, await read_json_body(request)
        )
        if payload is None:
            return render_errors(violation_errors(violations))
        result = await run_in_threadpool(service.create, request=payload)
        return render_envelope(result, status_code=HTTPStatus.CREATED)

    @router.get("/task/all")
    def fetch_all_tasks() -> JSONResponse:
        return render_envelope(service.fetch_all())

    @router.get("/task/{id}")
    def fetch_task(id: str) -> JSONResponse:
        key, violations = validate_request(TaskKeyRequest, {"id": id})
        if key is None:
            return render_errors(violation_errors(violations))
        return render_envelope(service.fetch(task_id=key.id))

    @router.put("/task")
    async def update_task(request: Request) -> JSONResponse:
        payload, violations = validate_request(
            TaskUpdateRequest, await read_json_body(request)
        )
        if payload is None:
            return render_errors(violation_errors(violations))
        result = await run_in_threadpool(service.update, request=payload)
        return render_envelope(result)

    @router.delete("/task/{id}")
    def delete_task(id: str) -> JSONResponse:
        key, violations = validate_request(TaskKeyRequest, {"id": id})
        if key is None:
            return render_errors(violation_errors(violations))
        return render_envelope(service.delete(task_id=key.id))
