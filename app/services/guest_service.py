import logging
from typing import Any, Dict, List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import commit
from app.core.exceptions import NotFoundError
from app.models.guest import Guest

logger = logging.getLogger(__name__)


async def create_guest(session: AsyncSession, payload: Dict[str, Any]) -> Guest:
    obj = Guest(**payload)
    session.add(obj)
    await commit(session, "Guest creation")
    await session.refresh(obj)
    logger.info("Guest created", extra={"guest_id": obj.id})
    return obj


async def list_guests(session: AsyncSession) -> List[Guest]:
    res = await session.execute(select(Guest).order_by(Guest.id))
    return list(res.scalars().all())


async def update_guest(session: AsyncSession, guest_id: int, changes: Dict[str, Any]) -> Guest:
    obj = await session.get(Guest, guest_id)
    if not obj:
        logger.warning("Guest update failed: id %s not found", guest_id)
        raise NotFoundError("Guest", guest_id)
    if not changes:
        return obj
    for k, v in changes.items():
        setattr(obj, k, v)
    session.add(obj)
    await commit(session, "Guest update")
    await session.refresh(obj)
    return obj


async def delete_guest(session: AsyncSession, guest_id: int) -> bool:
    obj = await session.get(Guest, guest_id)
    if not obj:
        return False
    await session.delete(obj)
    await commit(session, "Guest deletion")
    logger.info("Guest deleted", extra={"guest_id": guest_id})
    return True
