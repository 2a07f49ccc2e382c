from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.core.exceptions import NotFoundError
from app.services import guest_service
from app.schemas.common import DeleteInput, DeleteResult
from app.schemas.guest import GuestCreate, GuestRead, GuestUpdate

router = APIRouter()


@router.post("/createGuest", response_model=GuestRead, status_code=status.HTTP_201_CREATED)
async def create_guest(payload: GuestCreate, session: AsyncSession = Depends(get_session)):
    guest = await guest_service.create_guest(session, payload.model_dump())
    return GuestRead.model_validate(guest)


@router.get("/getGuests", response_model=List[GuestRead])
async def get_guests(session: AsyncSession = Depends(get_session)):
    items = await guest_service.list_guests(session)
    return [GuestRead.model_validate(i) for i in items]


@router.post("/updateGuest", response_model=GuestRead)
async def update_guest(payload: GuestUpdate, session: AsyncSession = Depends(get_session)):
    try:
        guest = await guest_service.update_guest(session, payload.id, payload.changes())
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return GuestRead.model_validate(guest)


@router.post("/deleteGuest", response_model=DeleteResult)
async def delete_guest(payload: DeleteInput, session: AsyncSession = Depends(get_session)):
    ok = await guest_service.delete_guest(session, payload.id)
    return DeleteResult(success=ok)
