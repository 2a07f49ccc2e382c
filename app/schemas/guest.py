from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.models.guest import RsvpStatus
from app.schemas.common import PartialUpdate


class GuestCreate(BaseModel):
    name: str = Field(min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    rsvp_status: RsvpStatus = RsvpStatus.PENDING
    meal_choice: Optional[str] = None
    dietary_restrictions: Optional[str] = None
    plus_one: bool = False
    plus_one_name: Optional[str] = None
    notes: Optional[str] = None


class GuestUpdate(PartialUpdate):
    non_nullable = ("name", "rsvp_status", "plus_one")

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    rsvp_status: Optional[RsvpStatus] = None
    meal_choice: Optional[str] = None
    dietary_restrictions: Optional[str] = None
    plus_one: Optional[bool] = None
    plus_one_name: Optional[str] = None
    notes: Optional[str] = None


class GuestRead(BaseModel):
    id: int
    name: str
    email: Optional[str]
    phone: Optional[str]
    rsvp_status: RsvpStatus
    meal_choice: Optional[str]
    dietary_restrictions: Optional[str]
    plus_one: bool
    plus_one_name: Optional[str]
    notes: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
