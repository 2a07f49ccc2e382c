# models package for SQLModel models
from .guest import Guest, RsvpStatus  # noqa: F401  (import for metadata registration)
from .vendor import Vendor  # noqa: F401
from .budget_item import BudgetItem  # noqa: F401
from .task import Task, TaskPriority, TaskStatus  # noqa: F401
