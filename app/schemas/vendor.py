from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.core.money import NonNegativeAmount, to_number
from app.schemas.common import PartialUpdate


class VendorCreate(BaseModel):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    contact_person: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    service_description: Optional[str] = None
    contract_amount: Optional[NonNegativeAmount] = None
    deposit_paid: Optional[NonNegativeAmount] = None
    notes: Optional[str] = None


class VendorUpdate(PartialUpdate):
    non_nullable = ("name", "category")

    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    contact_person: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    service_description: Optional[str] = None
    contract_amount: Optional[NonNegativeAmount] = None
    deposit_paid: Optional[NonNegativeAmount] = None
    notes: Optional[str] = None


class VendorRead(BaseModel):
    id: int
    name: str
    category: str
    contact_person: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    website: Optional[str]
    address: Optional[str]
    service_description: Optional[str]
    contract_amount: Optional[float]
    deposit_paid: Optional[float]
    notes: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("contract_amount", "deposit_paid", mode="before")
    @classmethod
    def decimal_to_number(cls, v):
        return to_number(v)
