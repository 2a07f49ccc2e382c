"""Async client for the planner procedures plus local per-tab state.

``PlannerClient`` wraps ``httpx.AsyncClient``; ``PlannerState`` keeps one
collection per entity type, re-fetched through the read-all procedures,
and computes the dashboard aggregates from what it holds.
"""
import asyncio
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Type

import httpx
from pydantic import BaseModel

from app.schemas.budget_item import BudgetItemRead
from app.schemas.dashboard import DashboardStatsRead
from app.schemas.guest import GuestRead
from app.schemas.task import TaskRead
from app.schemas.vendor import VendorRead
from app.services.planning_stats import compute_dashboard, sort_tasks

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class EntityProcedures:
    def __init__(self, name: str, plural: str, schema: Type[BaseModel]):
        self.create = f"create{name}"
        self.list = f"get{plural}"
        self.update = f"update{name}"
        self.delete = f"delete{name}"
        self.schema = schema


ENTITIES: Dict[str, EntityProcedures] = {
    "guests": EntityProcedures("Guest", "Guests", GuestRead),
    "vendors": EntityProcedures("Vendor", "Vendors", VendorRead),
    "budget_items": EntityProcedures("BudgetItem", "BudgetItems", BudgetItemRead),
    "tasks": EntityProcedures("Task", "Tasks", TaskRead),
}


class PlannerClientError(Exception):
    def __init__(self, procedure: str, status_code: int, payload: Any):
        self.procedure = procedure
        self.status_code = status_code
        self.payload = payload
        error = payload.get("error") if isinstance(payload, dict) else payload
        super().__init__(f"{procedure} failed with {status_code}: {error}")


class PlannerClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "PlannerClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _call(self, procedure: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        if payload is None:
            resp = await self._client.get(f"{API_PREFIX}/{procedure}")
        else:
            resp = await self._client.post(f"{API_PREFIX}/{procedure}", json=payload)
        return self._parse(procedure, resp)

    def _parse(self, procedure: str, resp: httpx.Response) -> Any:
        if resp.is_error:
            try:
                body = resp.json()
            except ValueError:
                body = resp.text
            logger.error("Procedure %s failed", procedure, extra={"status_code": resp.status_code})
            raise PlannerClientError(procedure, resp.status_code, body)
        return resp.json()

    async def healthcheck(self) -> Dict[str, Any]:
        resp = await self._client.get("/api/healthcheck")
        return self._parse("healthcheck", resp)

    async def create(self, kind: str, data: Dict[str, Any]) -> BaseModel:
        procs = ENTITIES[kind]
        return procs.schema.model_validate(await self._call(procs.create, data))

    async def list(self, kind: str) -> List[BaseModel]:
        procs = ENTITIES[kind]
        return [procs.schema.model_validate(r) for r in await self._call(procs.list)]

    async def update(self, kind: str, record_id: int, changes: Dict[str, Any]) -> BaseModel:
        """Send only the given fields; a None value clears the field."""
        procs = ENTITIES[kind]
        payload = {**changes, "id": record_id}
        return procs.schema.model_validate(await self._call(procs.update, payload))

    async def delete(self, kind: str, record_id: int) -> bool:
        result = await self._call(ENTITIES[kind].delete, {"id": record_id})
        return bool(result["success"])

    async def dashboard(self) -> DashboardStatsRead:
        return DashboardStatsRead.model_validate(await self._call("getDashboard"))


class PlannerState:
    """Local copies of the server collections, keyed by entity type."""

    def __init__(self, client: PlannerClient):
        self.client = client
        self.collections: Dict[str, List[BaseModel]] = {kind: [] for kind in ENTITIES}

    def __getitem__(self, kind: str) -> List[BaseModel]:
        return self.collections[kind]

    async def refresh(self, kind: str) -> List[BaseModel]:
        self.collections[kind] = await self.client.list(kind)
        return self.collections[kind]

    async def refresh_all(self) -> None:
        kinds = list(ENTITIES)
        results = await asyncio.gather(*(self.client.list(k) for k in kinds))
        self.collections.update(zip(kinds, results))

    async def create(self, kind: str, data: Dict[str, Any]) -> BaseModel:
        record = await self.client.create(kind, data)
        if kind == "tasks":
            # tasks are listed newest first
            self.collections[kind].insert(0, record)
        else:
            self.collections[kind].append(record)
        return record

    async def update(self, kind: str, record_id: int, changes: Dict[str, Any]) -> BaseModel:
        record = await self.client.update(kind, record_id, changes)
        self.collections[kind] = [
            record if r.id == record_id else r for r in self.collections[kind]
        ]
        return record

    async def delete(self, kind: str, record_id: int) -> bool:
        ok = await self.client.delete(kind, record_id)
        if ok:
            self.collections[kind] = [r for r in self.collections[kind] if r.id != record_id]
            if kind == "vendors":
                # the server detached dependents; pick up their null vendor_id
                await self.refresh("budget_items")
                await self.refresh("tasks")
        return ok

    def sorted_tasks(self, now: Optional[datetime] = None) -> List[BaseModel]:
        """Cached tasks in working order: overdue, then by due date, then priority."""
        return sort_tasks(self.collections["tasks"], now)

    def dashboard(self, now: Optional[datetime] = None, upcoming_limit: int = 5) -> DashboardStatsRead:
        stats = compute_dashboard(
            guests=self.collections["guests"],
            vendors=self.collections["vendors"],
            budget_items=self.collections["budget_items"],
            tasks=self.collections["tasks"],
            now=now,
            upcoming_limit=upcoming_limit,
        )
        return DashboardStatsRead.model_validate(stats, from_attributes=True)
