import logging
from typing import Any, Dict, List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import commit
from app.core.exceptions import NotFoundError
from app.core.money import to_decimal
from app.models.budget_item import BudgetItem
from app.services.vendor_service import ensure_vendor_exists

logger = logging.getLogger(__name__)

MONEY_FIELDS = ("budgeted_amount", "actual_amount")


def _to_columns(data: Dict[str, Any]) -> Dict[str, Any]:
    row = dict(data)
    for field in MONEY_FIELDS:
        if field in row:
            row[field] = to_decimal(row[field])
    return row


async def create_budget_item(session: AsyncSession, payload: Dict[str, Any]) -> BudgetItem:
    await ensure_vendor_exists(session, payload.get("vendor_id"))
    obj = BudgetItem(**_to_columns(payload))
    session.add(obj)
    await commit(session, "Budget item creation")
    await session.refresh(obj)
    logger.info("Budget item created", extra={"budget_item_id": obj.id})
    return obj


async def list_budget_items(session: AsyncSession) -> List[BudgetItem]:
    res = await session.execute(select(BudgetItem).order_by(BudgetItem.id))
    return list(res.scalars().all())


async def update_budget_item(session: AsyncSession, item_id: int, changes: Dict[str, Any]) -> BudgetItem:
    obj = await session.get(BudgetItem, item_id)
    if not obj:
        logger.warning("Budget item update failed: id %s not found", item_id)
        raise NotFoundError("Budget item", item_id)
    if not changes:
        return obj
    if "vendor_id" in changes:
        await ensure_vendor_exists(session, changes["vendor_id"])
    for k, v in _to_columns(changes).items():
        setattr(obj, k, v)
    session.add(obj)
    await commit(session, "Budget item update")
    await session.refresh(obj)
    return obj


async def delete_budget_item(session: AsyncSession, item_id: int) -> bool:
    obj = await session.get(BudgetItem, item_id)
    if not obj:
        return False
    await session.delete(obj)
    await commit(session, "Budget item deletion")
    logger.info("Budget item deleted", extra={"budget_item_id": item_id})
    return True
