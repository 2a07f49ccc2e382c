import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import commit
from app.core.exceptions import NotFoundError, VendorReferenceError
from app.core.money import to_decimal
from app.models.budget_item import BudgetItem
from app.models.task import Task
from app.models.vendor import Vendor

logger = logging.getLogger(__name__)

MONEY_FIELDS = ("contract_amount", "deposit_paid")


def _to_columns(data: Dict[str, Any]) -> Dict[str, Any]:
    # an explicit None stays None so it clears the column
    row = dict(data)
    for field in MONEY_FIELDS:
        if field in row:
            row[field] = to_decimal(row[field])
    return row


async def ensure_vendor_exists(session: AsyncSession, vendor_id: Optional[int]) -> None:
    """Raise VendorReferenceError when vendor_id is set but matches no vendor."""
    if vendor_id is None:
        return
    vendor = await session.get(Vendor, vendor_id)
    if not vendor:
        logger.warning("Unknown vendor reference", extra={"vendor_id": vendor_id})
        raise VendorReferenceError(vendor_id)


async def create_vendor(session: AsyncSession, payload: Dict[str, Any]) -> Vendor:
    obj = Vendor(**_to_columns(payload))
    session.add(obj)
    await commit(session, "Vendor creation")
    await session.refresh(obj)
    logger.info("Vendor created", extra={"vendor_id": obj.id})
    return obj


async def list_vendors(session: AsyncSession) -> List[Vendor]:
    res = await session.execute(select(Vendor).order_by(Vendor.id))
    return list(res.scalars().all())


async def update_vendor(session: AsyncSession, vendor_id: int, changes: Dict[str, Any]) -> Vendor:
    obj = await session.get(Vendor, vendor_id)
    if not obj:
        logger.warning("Vendor update failed: id %s not found", vendor_id)
        raise NotFoundError("Vendor", vendor_id)
    if not changes:
        return obj
    for k, v in _to_columns(changes).items():
        setattr(obj, k, v)
    session.add(obj)
    await commit(session, "Vendor update")
    await session.refresh(obj)
    return obj


async def delete_vendor(session: AsyncSession, vendor_id: int) -> bool:
    """Detach the vendor from its budget items and tasks, then delete it.

    The two detach statements and the delete share one transaction, so
    either all three land or none do. Dependents are kept with
    ``vendor_id = NULL``.
    """
    obj = await session.get(Vendor, vendor_id)
    if not obj:
        return False

    try:
        detached_items = await session.execute(
            update(BudgetItem).where(BudgetItem.vendor_id == vendor_id).values(vendor_id=None)
        )
        detached_tasks = await session.execute(
            update(Task).where(Task.vendor_id == vendor_id).values(vendor_id=None)
        )
        await session.delete(obj)
    except SQLAlchemyError:
        await session.rollback()
        logger.exception("Vendor deletion failed")
        raise
    await commit(session, "Vendor deletion")

    logger.info(
        "Vendor deleted",
        extra={
            "vendor_id": vendor_id,
            "budget_items_detached": detached_items.rowcount,
            "tasks_detached": detached_tasks.rowcount,
        },
    )
    return True
