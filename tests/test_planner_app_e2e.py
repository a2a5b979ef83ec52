"""End-to-end HTTP tests for schedule and task routes over an in-memory store."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from fastapi.testclient import TestClient

from packages.planner_core import build_app
from packages.planner_shared.config import load_settings

if TYPE_CHECKING:
    from conftest import InMemoryStore

_API_KEY = "test-api-key"
_HEADERS = {"apikey": _API_KEY}
_MISSING_ID = "11111111-2222-4333-8444-555555555555"

_SCHEDULE = {
    "accountId": 1,
    "agentId": 2,
    "startTime": "2024-05-01T08:00:00Z",
    "endTime": "2024-05-01T17:00:00Z",
}


@pytest.fixture
def client(store: InMemoryStore, tmp_path: Path) -> TestClient:
    """Return a test client wired to the in-memory store."""
    settings = load_settings(
        cli_params={"auth": {"api_key": _API_KEY}},
        config_path=tmp_path / "planner.yaml",
    )
    return TestClient(build_app(settings=settings, store=store))


def _create_schedule(client: TestClient) -> dict[str, Any]:
    """Create one schedule through the API and return its data."""
    response = client.post("/schedule", json=_SCHEDULE, headers=_HEADERS)
    assert response.status_code == 201
    return response.json()["data"]


def _task_body(schedule_id: str, **overrides: object) -> dict[str, object]:
    """Build one valid task body for a schedule."""
    body: dict[str, object] = {
        "accountId": 1,
        "scheduleId": schedule_id,
        "startTime": "2024-05-01T09:00:00Z",
        "duration": 30,
        "type": "work",
    }
    body.update(overrides)
    return body


def test_create_schedule_returns_created_envelope(client: TestClient) -> None:
    """POST /schedule should return 201 with the stored row and empty tasks."""
    response = client.post(
        "/schedule", json={**_SCHEDULE, "id": _MISSING_ID}, headers=_HEADERS
    )

    body = response.json()
    assert response.status_code == 201
    assert body["success"] is True
    assert body["message"] == "Schedule created successfully"
    assert body["data"]["tasks"] == []
    assert body["data"]["account_id"] == 1
    assert body["data"]["id"] != _MISSING_ID


def test_create_schedule_with_empty_body_lists_violations(client: TestClient) -> None:
    """An empty body should fail validation before touching the store."""
    response = client.post("/schedule", json={}, headers=_HEADERS)

    assert response.status_code == 400
    assert response.json() == {
        "statusCode": 400,
        "message": [
            "accountId should not be empty",
            "agentId should not be empty",
            "startTime should not be empty",
            "endTime should not be empty",
        ],
        "error": "Bad Request",
    }


def test_malformed_json_is_bad_request(client: TestClient) -> None:
    """Unparseable bodies should be rejected with 400."""
    response = client.post(
        "/task",
        content=b"{oops",
        headers={**_HEADERS, "content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == ["Body is not valid JSON"]


def test_fetch_schedule_with_malformed_id(client: TestClient) -> None:
    """Malformed ids should be rejected with the UUID constraint message."""
    response = client.get("/schedule/not-a-uuid", headers=_HEADERS)

    assert response.status_code == 400
    assert response.json()["message"] == ["id must be a UUID"]


def test_fetch_unknown_schedule_is_not_found(client: TestClient) -> None:
    """Unknown schedule ids should map to 404 with the catalog message."""
    response = client.get(f"/schedule/{_MISSING_ID}", headers=_HEADERS)

    assert response.status_code == 404
    assert response.json() == {
        "statusCode": 404,
        "message": "Schedule not found",
        "error": "Not Found",
    }


def test_schedule_lifecycle_with_tasks(client: TestClient, store: InMemoryStore) -> None:
    """Tasks should appear under their schedule and vanish when it is deleted."""
    schedule = _create_schedule(client)
    created = client.post("/task", json=_task_body(schedule["id"]), headers=_HEADERS)
    task = created.json()["data"]

    fetched = client.get(f"/schedule/{schedule['id']}", headers=_HEADERS)
    listed = client.get(f"/schedule/{schedule['id']}/tasks", headers=_HEADERS)
    deleted = client.delete(f"/schedule/{schedule['id']}", headers=_HEADERS)
    task_after = client.get(f"/task/{task['id']}", headers=_HEADERS)

    assert created.status_code == 201
    assert fetched.json()["message"] == "Schedule found"
    assert [item["id"] for item in fetched.json()["data"]["tasks"]] == [task["id"]]
    assert listed.json()["message"] == "Tasks found"
    assert [item["id"] for item in listed.json()["data"]] == [task["id"]]
    assert deleted.status_code == 200
    assert deleted.json() == {
        "success": True,
        "message": "Schedule deleted successfully",
        "data": None,
    }
    assert task_after.status_code == 404
    assert task_after.json()["message"] == "Task not found"
    assert store.tables["task"] == []


def test_all_route_is_not_treated_as_an_id(client: TestClient) -> None:
    """GET /schedule/all should list schedules rather than validate an id."""
    _create_schedule(client)
    _create_schedule(client)

    response = client.get("/schedule/all", headers=_HEADERS)

    assert response.status_code == 200
    assert response.json()["message"] == "Schedules found"
    assert len(response.json()["data"]) == 2


def test_update_schedule_with_identical_values(client: TestClient) -> None:
    """PUT /schedule with unchanged values should echo the stored state."""
    schedule = _create_schedule(client)

    response = client.put(
        "/schedule", json={**_SCHEDULE, "id": schedule["id"]}, headers=_HEADERS
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Schedule updated successfully"
    assert response.json()["data"] == schedule


def test_update_unknown_schedule_is_not_found(client: TestClient) -> None:
    """PUT /schedule for an unknown id should return 404."""
    response = client.put(
        "/schedule", json={**_SCHEDULE, "id": _MISSING_ID}, headers=_HEADERS
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Schedule not found"


def test_delete_schedule_that_survives_is_server_error(
    client: TestClient, store: InMemoryStore
) -> None:
    """A schedule still present after delete should map to 500."""
    schedule = _create_schedule(client)
    store.retain_deletes("schedule")

    response = client.delete(f"/schedule/{schedule['id']}", headers=_HEADERS)

    assert response.status_code == 500
    assert response.json()["message"] == "Deleting the schedule failed"


def test_schedule_store_failure_is_server_error(
    client: TestClient, store: InMemoryStore
) -> None:
    """Store failures on schedule listing should map to 500."""
    store.fail("select", "schedule")

    response = client.get("/schedule/all", headers=_HEADERS)

    assert response.status_code == 500
    assert response.json() == {
        "statusCode": 500,
        "message": "There was a problem fetching the schedules",
        "error": "Internal Server Error",
    }


def test_create_task_with_bad_type_reports_enum_constraint(client: TestClient) -> None:
    """An unknown task type should produce exactly one enum violation."""
    response = client.post(
        "/task", json=_task_body(_MISSING_ID, type="nap"), headers=_HEADERS
    )

    assert response.status_code == 400
    assert response.json()["message"] == [
        "type must be one of the following values: break, work"
    ]


def test_create_task_store_failure_is_soft(
    client: TestClient, store: InMemoryStore
) -> None:
    """Store failure on task create should still answer 201 with success false."""
    store.fail("insert", "task")

    response = client.post("/task", json=_task_body(_MISSING_ID), headers=_HEADERS)

    assert response.status_code == 201
    assert response.json() == {
        "success": False,
        "message": "There was a problem creating the task",
        "data": None,
    }


def test_task_update_and_delete_round(client: TestClient) -> None:
    """Tasks should be updatable and deletable by id."""
    schedule = _create_schedule(client)
    task = client.post(
        "/task", json=_task_body(schedule["id"]), headers=_HEADERS
    ).json()["data"]

    updated = client.put(
        "/task",
        json={**_task_body(schedule["id"], duration=90, type="break"), "id": task["id"]},
        headers=_HEADERS,
    )
    listed = client.get("/task/all", headers=_HEADERS)
    deleted = client.delete(f"/task/{task['id']}", headers=_HEADERS)
    deleted_again = client.delete(f"/task/{task['id']}", headers=_HEADERS)

    assert updated.status_code == 200
    assert updated.json()["data"]["duration"] == 90
    assert updated.json()["data"]["type"] == "break"
    assert [item["id"] for item in listed.json()["data"]] == [task["id"]]
    assert deleted.json()["message"] == "Task deleted successfully"
    assert deleted_again.status_code == 404
    assert deleted_again.json()["message"] == "Task not found"


def test_update_unknown_task_is_not_found(client: TestClient) -> None:
    """PUT /task for an unknown id should return 404."""
    response = client.put(
        "/task", json={**_task_body(_MISSING_ID), "id": _MISSING_ID}, headers=_HEADERS
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Task not found"


def test_unreadable_stored_row_renders_internal_error_body(
    store: InMemoryStore, tmp_path: Path
) -> None:
    """A stored row the task model rejects should yield a JSON 500 body."""
    settings = load_settings(
        cli_params={"auth": {"api_key": _API_KEY}},
        config_path=tmp_path / "planner.yaml",
    )
    store.seed(
        "task",
        account_id=1,
        schedule_id=_MISSING_ID,
        start_time="2024-05-01T09:00:00Z",
        duration=30,
        type="meeting",
    )
    client = TestClient(
        build_app(settings=settings, store=store), raise_server_exceptions=False
    )

    response = client.get("/task/all", headers=_HEADERS)

    assert response.status_code == 500
    assert response.json() == {
        "statusCode": 500,
        "message": "Internal Server Error",
        "error": "Internal Server Error",
    }


def test_app_shutdown_closes_store(store: InMemoryStore, tmp_path: Path) -> None:
    """Leaving the app lifespan should close the shared store client."""
    settings = load_settings(
        cli_params={"auth": {"api_key": _API_KEY}},
        config_path=tmp_path / "planner.yaml",
    )

    with TestClient(build_app(settings=settings, store=store)):
        assert store.closed is False

    assert store.closed is True
