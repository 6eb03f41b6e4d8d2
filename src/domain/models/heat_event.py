from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class HeatSign(str, Enum):
    STANDING_TO_BE_MOUNTED = "Standing to be mounted"
    MOUNTING_OTHERS = "Mounting other animals"
    RESTLESSNESS = "Restlessness"
    BELLOWING = "Bellowing/vocalization"
    CLEAR_MUCUS = "Clear mucus discharge"
    SWOLLEN_VULVA = "Swollen vulva"
    DECREASED_APPETITE = "Decreased appetite"
    INCREASED_ACTIVITY = "Increased activity"
    CHIN_RESTING = "Chin resting on others"
    DECREASED_MILK = "Decreased milk production"


class HeatAction(str, Enum):
    MARKED_FOR_BREEDING = "Marked for breeding"
    INSEMINATION_SCHEDULED = "Insemination scheduled"
    NATURAL_BREEDING_ARRANGED = "Natural breeding arranged"
    MONITOR = "Monitor further"
    VET_CONSULTATION = "Vet consultation needed"


@dataclass(frozen=True, slots=True)
class HeatEvent:
    animal_id: UUID
    event_date: datetime
    heat_signs: tuple[str, ...] = ()
    action_taken: str | None = None
    notes: str | None = None
    id: UUID | None = None
    created_at: datetime | None = None

    kind = "heat"

    def timestamp(self) -> datetime:
        return self.event_date
