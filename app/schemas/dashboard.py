from typing import List
from sqlmodel import SQLModel

from app.schemas.task import TaskRead


class GuestStatsRead(SQLModel):
    total: int
    attending: int
    pending: int
    notAttending: int
    plusOnes: int
    expectedHeadcount: int
    attendingPercentage: float
    pendingPercentage: float
    notAttendingPercentage: float


class CategoryBudgetRead(SQLModel):
    category: str
    budgeted: float
    spent: float
    percentUsed: float
    variance: float
    itemsCount: int


class BudgetStatsRead(SQLModel):
    totalBudgeted: float
    totalSpent: float
    remaining: float
    percentUsed: float
    itemsCount: int
    categories: List[CategoryBudgetRead]


class TaskStatsRead(SQLModel):
    total: int
    completed: int
    inProgress: int
    pending: int
    overdue: int
    percentComplete: float


class VendorStatsRead(SQLModel):
    count: int
    totalContract: float
    totalDeposit: float
    remainingPayment: float


class DashboardStatsRead(SQLModel):
    guests: GuestStatsRead
    budget: BudgetStatsRead
    tasks: TaskStatsRead
    vendors: VendorStatsRead
    upcomingTasks: List[TaskRead]
