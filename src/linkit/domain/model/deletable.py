"""Soft-delete capability shared by every persisted entity.

Records are hidden by flipping ``is_deleted`` rather than being removed;
``restore()`` brings them back.  Physical removal only happens through the
repository ``delete()`` (admin purge).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from linkit.domain.exceptions import ValidationError


@dataclass(kw_only=True)
class SoftDeletable:
    """Mixin for dataclass entities.

    The fields are keyword-only so subclasses may still declare required
    positional fields.
    """

    is_deleted: bool = False
    deleted_at: datetime | None = field(default=None)

    def soft_delete(self, now: datetime | None = None) -> None:
        if self.is_deleted:
            raise ValidationError(f"{type(self).__name__} is already deleted")
        self.is_deleted = True
        self.deleted_at = now or datetime.now(timezone.utc)

    def restore(self) -> None:
        if not self.is_deleted:
            raise ValidationError(f"{type(self).__name__} is not deleted")
        self.is_deleted = False
        self.deleted_at = None
