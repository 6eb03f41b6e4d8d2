from __future__ import annotations

from enum import Enum


class ProductionStatus(str, Enum):
    HEIFER = "heifer"
    DRY = "dry"
    LACTATING = "lactating"
    SERVED = "served"
    PREGNANT = "pregnant"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str | None) -> ProductionStatus | None:
        """Case-insensitive lookup; unknown or empty values yield None."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    def is_breedable(self) -> bool:
        return self in BREEDABLE_STATUSES

    def is_in_milk_cycle(self) -> bool:
        return self in {ProductionStatus.LACTATING, ProductionStatus.DRY}


BREEDABLE_STATUSES = frozenset(
    {
        ProductionStatus.HEIFER,
        ProductionStatus.DRY,
        ProductionStatus.LACTATING,
        ProductionStatus.SERVED,
        ProductionStatus.PREGNANT,
    }
)
