from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.money import Amount, PositiveAmount, to_number
from app.schemas.common import PartialUpdate


class BudgetItemCreate(BaseModel):
    category: str = Field(min_length=1)
    item_name: str = Field(min_length=1)
    budgeted_amount: PositiveAmount
    actual_amount: Optional[Amount] = None
    vendor_id: Optional[int] = None
    notes: Optional[str] = None


class BudgetItemUpdate(PartialUpdate):
    non_nullable = ("category", "item_name", "budgeted_amount")

    category: Optional[str] = Field(default=None, min_length=1)
    item_name: Optional[str] = Field(default=None, min_length=1)
    budgeted_amount: Optional[PositiveAmount] = None
    actual_amount: Optional[Amount] = None
    vendor_id: Optional[int] = None
    notes: Optional[str] = None


class BudgetItemRead(BaseModel):
    id: int
    category: str
    item_name: str
    budgeted_amount: float
    actual_amount: Optional[float]
    vendor_id: Optional[int]
    notes: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("budgeted_amount", "actual_amount", mode="before")
    @classmethod
    def decimal_to_number(cls, v):
        return to_number(v)
