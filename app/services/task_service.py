import logging
from typing import Any, Dict, List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import commit
from app.core.exceptions import NotFoundError
from app.models.task import Task
from app.services.vendor_service import ensure_vendor_exists

logger = logging.getLogger(__name__)


async def create_task(session: AsyncSession, payload: Dict[str, Any]) -> Task:
    await ensure_vendor_exists(session, payload.get("vendor_id"))
    obj = Task(**payload)
    session.add(obj)
    await commit(session, "Task creation")
    await session.refresh(obj)
    logger.info("Task created", extra={"task_id": obj.id})
    return obj


async def list_tasks(session: AsyncSession) -> List[Task]:
    # newest first
    stmt = select(Task).order_by(Task.created_at.desc(), Task.id.desc())
    res = await session.execute(stmt)
    return list(res.scalars().all())


async def update_task(session: AsyncSession, task_id: int, changes: Dict[str, Any]) -> Task:
    obj = await session.get(Task, task_id)
    if not obj:
        logger.warning("Task update failed: id %s not found", task_id)
        raise NotFoundError("Task", task_id)
    if not changes:
        return obj
    if "vendor_id" in changes:
        await ensure_vendor_exists(session, changes["vendor_id"])
    for k, v in changes.items():
        setattr(obj, k, v)
    session.add(obj)
    await commit(session, "Task update")
    await session.refresh(obj)
    return obj


async def delete_task(session: AsyncSession, task_id: int) -> bool:
    obj = await session.get(Task, task_id)
    if not obj:
        return False
    await session.delete(obj)
    await commit(session, "Task deletion")
    logger.info("Task deleted", extra={"task_id": task_id})
    return True
