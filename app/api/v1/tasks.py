from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.core.exceptions import NotFoundError, VendorReferenceError
from app.services import task_service
from app.schemas.common import DeleteInput, DeleteResult
from app.schemas.task import TaskCreate, TaskRead, TaskUpdate

router = APIRouter()


@router.post("/createTask", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
async def create_task(payload: TaskCreate, session: AsyncSession = Depends(get_session)):
    try:
        task = await task_service.create_task(session, payload.model_dump())
    except VendorReferenceError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return TaskRead.model_validate(task)


@router.get("/getTasks", response_model=List[TaskRead])
async def get_tasks(session: AsyncSession = Depends(get_session)):
    items = await task_service.list_tasks(session)
    return [TaskRead.model_validate(i) for i in items]


# Status may be set to any value; Start/Complete ordering is a UI convention
@router.post("/updateTask", response_model=TaskRead)
async def update_task(payload: TaskUpdate, session: AsyncSession = Depends(get_session)):
    try:
        task = await task_service.update_task(session, payload.id, payload.changes())
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    except VendorReferenceError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return TaskRead.model_validate(task)


@router.post("/deleteTask", response_model=DeleteResult)
async def delete_task(payload: DeleteInput, session: AsyncSession = Depends(get_session)):
    ok = await task_service.delete_task(session, payload.id)
    return DeleteResult(success=ok)
