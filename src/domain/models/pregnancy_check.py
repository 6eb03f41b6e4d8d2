from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID


class PregnancyCheckResult(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    INCONCLUSIVE = "inconclusive"


class PregnancyCheckMethod(str, Enum):
    PALPATION = "palpation"
    ULTRASOUND = "ultrasound"
    BLOOD_TEST = "blood_test"
    VISUAL = "visual"


@dataclass(frozen=True, slots=True)
class PregnancyCheck:
    animal_id: UUID
    check_date: datetime
    result: str
    method: str | None = None
    checked_by: str | None = None
    estimated_due_date: date | None = None
    id: UUID | None = None
    created_at: datetime | None = None

    kind = "pregnancy_check"

    def timestamp(self) -> datetime:
        return self.check_date

    @property
    def is_positive(self) -> bool:
        return (self.result or "").lower() == PregnancyCheckResult.POSITIVE.value
