from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlalchemy import Column, DateTime, Numeric, func
from sqlmodel import SQLModel, Field


class BudgetItem(SQLModel, table=True):
    __tablename__ = "budget_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    category: str
    item_name: str
    budgeted_amount: Decimal = Field(sa_column=Column(Numeric(10, 2), nullable=False))
    actual_amount: Optional[Decimal] = Field(default=None, sa_column=Column(Numeric(10, 2), nullable=True))
    vendor_id: Optional[int] = Field(default=None, foreign_key="vendors.id", index=True)
    notes: Optional[str] = None
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(
            DateTime(timezone=False),
            server_default=func.now(),
            nullable=False,
        )
    )
