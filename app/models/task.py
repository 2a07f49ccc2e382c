from datetime import datetime
from typing import Optional
from enum import Enum
from sqlalchemy import Column, DateTime, Enum as SAEnum, func
from sqlmodel import SQLModel, Field


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


def _enum_values(enum_cls):
    return [m.value for m in enum_cls]


class Task(SQLModel, table=True):
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=False), nullable=True))
    priority: TaskPriority = Field(
        default=TaskPriority.MEDIUM,
        sa_column=Column(
            SAEnum(TaskPriority, name="task_priority", values_callable=_enum_values),
            nullable=False,
            default=TaskPriority.MEDIUM,
        ),
    )
    # transitions are suggested by the UI, any value may be set
    status: TaskStatus = Field(
        default=TaskStatus.PENDING,
        sa_column=Column(
            SAEnum(TaskStatus, name="task_status", values_callable=_enum_values),
            nullable=False,
            default=TaskStatus.PENDING,
        ),
    )
    assigned_to: Optional[str] = None
    vendor_id: Optional[int] = Field(default=None, foreign_key="vendors.id", index=True)
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(
            DateTime(timezone=False),
            server_default=func.now(),
            nullable=False,
        )
    )
