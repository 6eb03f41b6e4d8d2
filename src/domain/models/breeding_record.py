from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID


class BreedingMethod(str, Enum):
    NATURAL = "natural"
    ARTIFICIAL_INSEMINATION = "artificial_insemination"


class PregnancyStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    NEGATIVE = "negative"
    ABORTED = "aborted"
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class BreedingRecord:
    """Legacy combined service/pregnancy/calving row.

    Older farms recorded the whole cycle on a single record before the
    per-event streams existed; it is still read alongside them.
    """

    animal_id: UUID
    breeding_date: date
    method: str = BreedingMethod.ARTIFICIAL_INSEMINATION.value
    pregnancy_status: str = PregnancyStatus.PENDING.value
    expected_calving_date: date | None = None
    actual_calving_date: date | None = None
    id: UUID | None = None
    created_at: datetime | None = None

    kind = "breeding_record"

    def timestamp(self) -> date:
        return self.breeding_date

    @property
    def status(self) -> PregnancyStatus | None:
        try:
            return PregnancyStatus((self.pregnancy_status or "").lower())
        except ValueError:
            return None

    @property
    def is_open_confirmed(self) -> bool:
        return self.status is PregnancyStatus.CONFIRMED and self.actual_calving_date is None
