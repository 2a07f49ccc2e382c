from datetime import datetime

import pytest

from app.core.exceptions import VendorReferenceError
from app.services import task_service


def make_task(**overrides):
    data = {
        "title": "Book photographer",
        "description": None,
        "due_date": None,
        "assigned_to": "Alex",
        "vendor_id": None,
    }
    data.update(overrides)
    return data


async def create(client, **overrides):
    resp = await client.post("/api/v1/createTask", json=make_task(**overrides))
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.mark.asyncio
async def test_create_task_defaults(client):
    task = await create(client)

    assert task["priority"] == "medium"
    assert task["status"] == "pending"
    assert task["due_date"] is None


@pytest.mark.asyncio
async def test_create_task_stores_due_date_as_utc(client):
    task = await create(client, due_date="2026-06-01T18:00:00+02:00")

    assert datetime.fromisoformat(task["due_date"]) == datetime(2026, 6, 1, 16, 0)


@pytest.mark.asyncio
async def test_get_tasks_newest_first(client):
    first = await create(client, title="Send invitations")
    second = await create(client, title="Order cake")
    third = await create(client, title="Pick flowers")

    tasks = (await client.get("/api/v1/getTasks")).json()

    assert [t["id"] for t in tasks] == [third["id"], second["id"], first["id"]]


@pytest.mark.asyncio
async def test_create_task_with_unknown_vendor(client):
    resp = await client.post("/api/v1/createTask", json=make_task(vendor_id=999999))

    assert resp.status_code == 400
    assert (await client.get("/api/v1/getTasks")).json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"title": ""},
        {"priority": "urgent"},
        {"status": "done"},
        {"due_date": "not a date"},
    ],
)
async def test_create_task_rejects_invalid_input(client, overrides):
    resp = await client.post("/api/v1/createTask", json=make_task(**overrides))

    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_task_status_may_move_in_any_direction(client):
    task = await create(client)

    done = (await client.post(
        "/api/v1/updateTask", json={"id": task["id"], "status": "completed"}
    )).json()
    reopened = (await client.post(
        "/api/v1/updateTask", json={"id": task["id"], "status": "pending"}
    )).json()

    assert done["status"] == "completed"
    assert reopened["status"] == "pending"


@pytest.mark.asyncio
async def test_update_task_partial(client):
    task = await create(client, due_date="2026-05-01T09:00:00", description="Shortlist three")

    updated = (await client.post(
        "/api/v1/updateTask", json={"id": task["id"], "due_date": None, "priority": "high"}
    )).json()

    assert updated["due_date"] is None
    assert updated["priority"] == "high"
    assert updated["description"] == "Shortlist three"
    assert updated["assigned_to"] == "Alex"


@pytest.mark.asyncio
async def test_update_task_rejects_null_status(client):
    task = await create(client)

    resp = await client.post("/api/v1/updateTask", json={"id": task["id"], "status": None})

    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_update_missing_task_is_not_found(client):
    resp = await client.post("/api/v1/updateTask", json={"id": 999, "title": "Ghost"})

    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_task_twice(client):
    task = await create(client)

    first = await client.post("/api/v1/deleteTask", json={"id": task["id"]})
    second = await client.post("/api/v1/deleteTask", json={"id": task["id"]})

    assert first.json() == {"success": True}
    assert second.json() == {"success": False}


@pytest.mark.asyncio
async def test_delete_input_requires_id(client):
    resp = await client.post("/api/v1/deleteTask", json={})

    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_service_update_rejects_unknown_vendor(session):
    task = await task_service.create_task(session, make_task())

    with pytest.raises(VendorReferenceError):
        await task_service.update_task(session, task.id, {"vendor_id": 999999})
