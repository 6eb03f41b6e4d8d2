from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID


class InseminationMethod(str, Enum):
    AI = "ai"
    NATURAL = "natural"


@dataclass(frozen=True, slots=True)
class InseminationEvent:
    animal_id: UUID
    event_date: datetime
    method: str = InseminationMethod.AI.value

    sire_code: str | None = None
    technician: str | None = None
    # Due date entered alongside the service, informational only
    estimated_due_date: date | None = None
    notes: str | None = None
    id: UUID | None = None
    created_at: datetime | None = None

    kind = "insemination"

    def timestamp(self) -> datetime:
        return self.event_date
