from datetime import datetime

import httpx
import pytest
import pytest_asyncio

from app.client import PlannerClient, PlannerClientError, PlannerState
from app.core.database import get_session
from app.main import app as fastapi_app


@pytest_asyncio.fixture
async def planner(session_factory):
    async def override_get_session():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_session] = override_get_session
    client = PlannerClient(base_url="http://test", transport=httpx.ASGITransport(app=fastapi_app))
    async with client:
        yield client
    fastapi_app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_healthcheck(planner):
    health = await planner.healthcheck()

    assert health["status"] == "ok"
    assert health["timestamp"]


@pytest.mark.asyncio
async def test_client_crud_round_trip(planner):
    guest = await planner.create("guests", {"name": "Jane Smith"})
    updated = await planner.update("guests", guest.id, {"rsvp_status": "attending"})

    assert updated.rsvp_status.value == "attending"
    assert [g.id for g in await planner.list("guests")] == [guest.id]
    assert await planner.delete("guests", guest.id) is True
    assert await planner.delete("guests", guest.id) is False


@pytest.mark.asyncio
async def test_client_raises_on_failed_procedure(planner):
    with pytest.raises(PlannerClientError) as excinfo:
        await planner.update("tasks", 404, {"title": "Missing"})

    assert excinfo.value.status_code == 404
    assert excinfo.value.payload == {"error": "Task with id 404 not found"}


@pytest.mark.asyncio
async def test_client_reference_error(planner):
    with pytest.raises(PlannerClientError) as excinfo:
        await planner.create("budget_items", {
            "category": "Venue",
            "item_name": "Hall",
            "budgeted_amount": 100,
            "vendor_id": 999999,
        })

    assert excinfo.value.status_code == 400


@pytest.mark.asyncio
async def test_state_refresh_and_local_updates(planner):
    state = PlannerState(planner)
    await planner.create("guests", {"name": "Jane Smith", "rsvp_status": "attending"})

    await state.refresh_all()
    assert len(state["guests"]) == 1
    assert state["tasks"] == []

    first = await state.create("tasks", {"title": "Send invitations"})
    second = await state.create("tasks", {"title": "Order cake"})
    assert [t.id for t in state["tasks"]] == [second.id, first.id]

    await state.update("tasks", first.id, {"status": "completed"})
    assert state["tasks"][1].status.value == "completed"

    await state.delete("tasks", second.id)
    assert [t.id for t in state["tasks"]] == [first.id]
    assert [t.id for t in await state.refresh("tasks")] == [first.id]


@pytest.mark.asyncio
async def test_state_vendor_delete_refreshes_dependents(planner):
    state = PlannerState(planner)
    vendor = await state.create("vendors", {
        "name": "Studio", "category": "Photography", "contract_amount": 2500.0, "deposit_paid": 500.0,
    })
    await state.create("budget_items", {
        "category": "Photography", "item_name": "Photos", "budgeted_amount": 2500.0, "vendor_id": vendor.id,
    })

    assert await state.delete("vendors", vendor.id) is True

    assert state["vendors"] == []
    assert state["budget_items"][0].vendor_id is None
    assert state["budget_items"][0].budgeted_amount == 2500.0


@pytest.mark.asyncio
async def test_local_dashboard_matches_server(planner):
    state = PlannerState(planner)
    await state.create("guests", {"name": "Jane Smith", "rsvp_status": "attending", "plus_one": True})
    await state.create("vendors", {"name": "Florist", "category": "Flowers", "contract_amount": 800.0})
    await state.create("budget_items", {
        "category": "Flowers", "item_name": "Bouquets", "budgeted_amount": 800.0, "actual_amount": 650.5,
    })
    await state.create("tasks", {"title": "Confirm order", "due_date": "2099-01-01T00:00:00"})

    local = state.dashboard()
    remote = await planner.dashboard()

    assert local.model_dump() == remote.model_dump()
    assert local.guests.expectedHeadcount == 2
    assert local.budget.totalSpent == 650.5
    assert local.vendors.remainingPayment == 800.0
    assert [t.title for t in local.upcomingTasks] == ["Confirm order"]


@pytest.mark.asyncio
async def test_failed_healthcheck_raises_client_error():
    def unavailable(request):
        return httpx.Response(503, json={"error": "Service unavailable"})

    async with PlannerClient(base_url="http://test", transport=httpx.MockTransport(unavailable)) as client:
        with pytest.raises(PlannerClientError) as excinfo:
            await client.healthcheck()

    assert excinfo.value.procedure == "healthcheck"
    assert excinfo.value.status_code == 503
    assert excinfo.value.payload == {"error": "Service unavailable"}


@pytest.mark.asyncio
async def test_state_sorted_tasks(planner):
    state = PlannerState(planner)
    await state.create("tasks", {"title": "Buy shoes", "priority": "low"})
    await state.create("tasks", {"title": "Order cake", "due_date": "2026-07-01T00:00:00"})
    await state.create("tasks", {"title": "Write vows", "priority": "high"})
    await state.create("tasks", {"title": "Book florist", "due_date": "2026-01-01T00:00:00"})
    await state.create(
        "tasks", {"title": "Mail invitations", "due_date": "2026-01-01T00:00:00", "status": "completed"}
    )

    ordered = state.sorted_tasks(now=datetime(2026, 6, 1))

    assert [t.title for t in ordered] == [
        "Book florist",
        "Mail invitations",
        "Order cake",
        "Write vows",
        "Buy shoes",
    ]
