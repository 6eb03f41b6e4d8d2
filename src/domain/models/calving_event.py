from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID


class CalvingOutcome(str, Enum):
    NORMAL = "normal"
    ASSISTED = "assisted"
    DIFFICULT = "difficult"
    CAESAREAN = "caesarean"


@dataclass(frozen=True, slots=True)
class CalvingEvent:
    animal_id: UUID
    event_date: datetime
    # Carried over from the pregnancy this calving closed
    estimated_due_date: date | None = None
    outcome: str | None = None
    notes: str | None = None
    id: UUID | None = None
    created_at: datetime | None = None

    kind = "calving"

    def timestamp(self) -> datetime:
        return self.event_date
