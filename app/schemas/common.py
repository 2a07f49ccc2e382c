from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Optional, Tuple
from pydantic import BaseModel, model_validator


class DeleteInput(BaseModel):
    id: int


class DeleteResult(BaseModel):
    success: bool


def naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are stored without a zone; aware values are shifted to UTC first."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class PartialUpdate(BaseModel):
    """Base for update payloads: ``id`` plus any subset of the entity's fields.

    Only fields the caller actually sent end up in :meth:`changes`, so an
    omitted field keeps its stored value while an explicit ``null`` clears it.
    Fields listed in ``non_nullable`` map to NOT NULL columns and may be
    omitted but never sent as ``null``.
    """

    non_nullable: ClassVar[Tuple[str, ...]] = ()

    id: int

    @model_validator(mode="after")
    def reject_null_required(self):
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude={"id"})
