from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(slots=True)
class Animal:
    id: UUID
    tenant_id: UUID
    tag: str
    name: str | None = None
    birth_date: date | None = None
    production_status: str | None = None
    sex: str | None = None

    # Disposition fields
    disposition_at: datetime | None = None
    deleted_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.disposition_at is None and self.deleted_at is None
