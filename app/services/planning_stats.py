"""Dashboard aggregates computed in memory over already-fetched collections.

Every function takes plain sequences of records (ORM rows or Read schemas)
and returns camelCase dicts matching the schemas in app.schemas.dashboard.
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence

from app.schemas.common import naive_utc

PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}


def _value(v: Any) -> Any:
    return v.value if isinstance(v, Enum) else v


def _amount(v: Any) -> Decimal:
    # null actual amounts count as nothing spent
    if v is None:
        return Decimal(0)
    return v if isinstance(v, Decimal) else Decimal(str(v))


def _percent(part, whole) -> float:
    if not whole:
        return 0.0
    return round(float(part) / float(whole) * 100, 2)


def _count(records: Iterable[Any], attr: str, value: str) -> int:
    return sum(1 for r in records if _value(getattr(r, attr)) == value)


def is_overdue(task: Any, now: Optional[datetime] = None) -> bool:
    """A task is overdue when it has a past due date and is not completed."""
    if task.due_date is None or _value(task.status) == "completed":
        return False
    now = naive_utc(now) if now else datetime.utcnow()
    return naive_utc(task.due_date) < now


def guest_stats(guests: Sequence[Any]) -> Dict[str, Any]:
    total = len(guests)
    attending = _count(guests, "rsvp_status", "attending")
    pending = _count(guests, "rsvp_status", "pending")
    not_attending = _count(guests, "rsvp_status", "not_attending")
    attending_plus_ones = sum(
        1 for g in guests if g.plus_one and _value(g.rsvp_status) == "attending"
    )

    return {
        "total": total,
        "attending": attending,
        "pending": pending,
        "notAttending": not_attending,
        "plusOnes": sum(1 for g in guests if g.plus_one),
        "expectedHeadcount": attending + attending_plus_ones,
        "attendingPercentage": _percent(attending, total),
        "pendingPercentage": _percent(pending, total),
        "notAttendingPercentage": _percent(not_attending, total),
    }


def budget_stats(items: Sequence[Any]) -> Dict[str, Any]:
    total_budgeted = sum((_amount(i.budgeted_amount) for i in items), Decimal(0))
    total_spent = sum((_amount(i.actual_amount) for i in items), Decimal(0))

    # categories keep the order in which they first appear
    grouped: Dict[str, List[Any]] = {}
    for item in items:
        grouped.setdefault(item.category, []).append(item)

    categories = []
    for category, members in grouped.items():
        budgeted = sum((_amount(i.budgeted_amount) for i in members), Decimal(0))
        spent = sum((_amount(i.actual_amount) for i in members), Decimal(0))
        categories.append({
            "category": category,
            "budgeted": float(budgeted),
            "spent": float(spent),
            "percentUsed": _percent(spent, budgeted),
            "variance": float(spent - budgeted),
            "itemsCount": len(members),
        })

    return {
        "totalBudgeted": float(total_budgeted),
        "totalSpent": float(total_spent),
        "remaining": float(total_budgeted - total_spent),
        "percentUsed": _percent(total_spent, total_budgeted),
        "itemsCount": len(items),
        "categories": categories,
    }


def task_stats(tasks: Sequence[Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    total = len(tasks)
    completed = _count(tasks, "status", "completed")
    return {
        "total": total,
        "completed": completed,
        "inProgress": _count(tasks, "status", "in_progress"),
        "pending": _count(tasks, "status", "pending"),
        "overdue": sum(1 for t in tasks if is_overdue(t, now)),
        "percentComplete": _percent(completed, total),
    }


def vendor_stats(vendors: Sequence[Any]) -> Dict[str, Any]:
    total_contract = sum((_amount(v.contract_amount) for v in vendors), Decimal(0))
    total_deposit = sum((_amount(v.deposit_paid) for v in vendors), Decimal(0))
    return {
        "count": len(vendors),
        "totalContract": float(total_contract),
        "totalDeposit": float(total_deposit),
        "remainingPayment": float(total_contract - total_deposit),
    }


def upcoming_tasks(tasks: Sequence[Any], limit: int = 5) -> List[Any]:
    """Open tasks with a due date, soonest first."""
    open_tasks = [
        t for t in tasks
        if t.due_date is not None and _value(t.status) != "completed"
    ]
    open_tasks.sort(key=lambda t: naive_utc(t.due_date))
    return open_tasks[:limit]


def sort_tasks(tasks: Sequence[Any], now: Optional[datetime] = None) -> List[Any]:
    """Overdue tasks first, then by due date (undated last), then by priority."""
    def key(t):
        due = naive_utc(t.due_date) if t.due_date is not None else datetime.max
        return (
            not is_overdue(t, now),
            t.due_date is None,
            due,
            PRIORITY_ORDER.get(_value(t.priority), len(PRIORITY_ORDER)),
        )

    return sorted(tasks, key=key)


def compute_dashboard(
    guests: Sequence[Any],
    vendors: Sequence[Any],
    budget_items: Sequence[Any],
    tasks: Sequence[Any],
    now: Optional[datetime] = None,
    upcoming_limit: int = 5,
) -> Dict[str, Any]:
    return {
        "guests": guest_stats(guests),
        "budget": budget_stats(budget_items),
        "tasks": task_stats(tasks, now),
        "vendors": vendor_stats(vendors),
        "upcomingTasks": upcoming_tasks(tasks, upcoming_limit),
    }
