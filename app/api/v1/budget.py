from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.core.exceptions import NotFoundError, VendorReferenceError
from app.services import budget_service
from app.schemas.common import DeleteInput, DeleteResult
from app.schemas.budget_item import BudgetItemCreate, BudgetItemRead, BudgetItemUpdate

router = APIRouter()


@router.post("/createBudgetItem", response_model=BudgetItemRead, status_code=status.HTTP_201_CREATED)
async def create_budget_item(payload: BudgetItemCreate, session: AsyncSession = Depends(get_session)):
    try:
        item = await budget_service.create_budget_item(session, payload.model_dump())
    except VendorReferenceError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return BudgetItemRead.model_validate(item)


@router.get("/getBudgetItems", response_model=List[BudgetItemRead])
async def get_budget_items(session: AsyncSession = Depends(get_session)):
    items = await budget_service.list_budget_items(session)
    return [BudgetItemRead.model_validate(i) for i in items]


@router.post("/updateBudgetItem", response_model=BudgetItemRead)
async def update_budget_item(payload: BudgetItemUpdate, session: AsyncSession = Depends(get_session)):
    try:
        item = await budget_service.update_budget_item(session, payload.id, payload.changes())
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    except VendorReferenceError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return BudgetItemRead.model_validate(item)


@router.post("/deleteBudgetItem", response_model=DeleteResult)
async def delete_budget_item(payload: DeleteInput, session: AsyncSession = Depends(get_session)):
    ok = await budget_service.delete_budget_item(session, payload.id)
    return DeleteResult(success=ok)
