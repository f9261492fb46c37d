"""Audit fields shared by catalog entities.

Entities record who created and last updated them. The fields are only
written through ``_mark_created`` and ``_mark_updated``, which the entity
factory and update methods call.
"""

from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(kw_only=True)
class AuditedEntity:
    """Base for entities with created/updated audit trail.

    Attributes:
        created_by: Free-text author of the record.
        created_date: UTC timestamp of creation.
        updated_by: Free-text author of the last update ("" until updated).
        updated_date: UTC timestamp of the last update.
    """

    created_by: str = ""
    created_date: datetime | None = None
    updated_by: str = ""
    updated_date: datetime | None = None

    def _mark_created(self, created_by: str) -> None:
        now = datetime.now(UTC)
        self.created_by = created_by
        self.created_date = now
        self.updated_by = ""
        self.updated_date = now

    def _mark_updated(self, updated_by: str) -> None:
        self.updated_by = updated_by
        self.updated_date = datetime.now(UTC)
