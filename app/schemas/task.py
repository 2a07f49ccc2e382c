from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.task import TaskPriority, TaskStatus
from app.schemas.common import PartialUpdate, naive_utc


class TaskCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    assigned_to: Optional[str] = None
    vendor_id: Optional[int] = None

    @field_validator("due_date")
    @classmethod
    def store_as_utc(cls, v):
        return naive_utc(v)


class TaskUpdate(PartialUpdate):
    non_nullable = ("title", "priority", "status")

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    assigned_to: Optional[str] = None
    vendor_id: Optional[int] = None

    @field_validator("due_date")
    @classmethod
    def store_as_utc(cls, v):
        return naive_utc(v)


class TaskRead(BaseModel):
    id: int
    title: str
    description: Optional[str]
    due_date: Optional[datetime]
    priority: TaskPriority
    status: TaskStatus
    assigned_to: Optional[str]
    vendor_id: Optional[int]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
