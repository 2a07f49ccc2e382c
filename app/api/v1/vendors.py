from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.core.exceptions import NotFoundError
from app.services import vendor_service
from app.schemas.common import DeleteInput, DeleteResult
from app.schemas.vendor import VendorCreate, VendorRead, VendorUpdate

router = APIRouter()


@router.post("/createVendor", response_model=VendorRead, status_code=status.HTTP_201_CREATED)
async def create_vendor(payload: VendorCreate, session: AsyncSession = Depends(get_session)):
    vendor = await vendor_service.create_vendor(session, payload.model_dump())
    return VendorRead.model_validate(vendor)


@router.get("/getVendors", response_model=List[VendorRead])
async def get_vendors(session: AsyncSession = Depends(get_session)):
    items = await vendor_service.list_vendors(session)
    return [VendorRead.model_validate(i) for i in items]


@router.post("/updateVendor", response_model=VendorRead)
async def update_vendor(payload: VendorUpdate, session: AsyncSession = Depends(get_session)):
    try:
        vendor = await vendor_service.update_vendor(session, payload.id, payload.changes())
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return VendorRead.model_validate(vendor)


# Budget items and tasks pointing at the vendor are kept with vendor_id = null
@router.post("/deleteVendor", response_model=DeleteResult)
async def delete_vendor(payload: DeleteInput, session: AsyncSession = Depends(get_session)):
    ok = await vendor_service.delete_vendor(session, payload.id)
    return DeleteResult(success=ok)
