from datetime import datetime
from typing import Optional
from enum import Enum
from sqlalchemy import Column, DateTime, Enum as SAEnum, func
from sqlmodel import SQLModel, Field


class RsvpStatus(str, Enum):
    PENDING = "pending"
    ATTENDING = "attending"
    NOT_ATTENDING = "not_attending"


class Guest(SQLModel, table=True):
    __tablename__ = "guests"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    rsvp_status: RsvpStatus = Field(
        default=RsvpStatus.PENDING,
        sa_column=Column(
            SAEnum(RsvpStatus, name="rsvp_status", values_callable=lambda e: [m.value for m in e]),
            nullable=False,
            default=RsvpStatus.PENDING,
        ),
    )
    meal_choice: Optional[str] = None
    dietary_restrictions: Optional[str] = None
    plus_one: bool = Field(default=False)
    # only meaningful when plus_one is set; not enforced
    plus_one_name: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(
            DateTime(timezone=False),
            server_default=func.now(),
            nullable=False,
        )
    )
