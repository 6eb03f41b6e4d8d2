from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

DEFAULT_MINIMUM_BREEDING_AGE_MONTHS = 15
DEFAULT_GESTATION_PERIOD_DAYS = 280
DEFAULT_PREGNANCY_CHECK_WAIT_DAYS = 30
DEFAULT_POSTPARTUM_BREEDING_DELAY_DAYS = 60
DEFAULT_HEAT_CYCLE_DAYS = 21


@dataclass(frozen=True, slots=True)
class BreedingSettings:
    minimum_breeding_age_months: int = DEFAULT_MINIMUM_BREEDING_AGE_MONTHS
    default_gestation_period_days: int = DEFAULT_GESTATION_PERIOD_DAYS
    pregnancy_check_wait_days: int = DEFAULT_PREGNANCY_CHECK_WAIT_DAYS
    postpartum_breeding_delay_days: int = DEFAULT_POSTPARTUM_BREEDING_DELAY_DAYS
    heat_cycle_days: int = DEFAULT_HEAT_CYCLE_DAYS
    # Consumed by the scheduling side, not by the cycle engine
    auto_schedule_pregnancy_check: bool = True

    @classmethod
    def from_values(cls, values: Mapping[str, Any] | None) -> BreedingSettings:
        """Build settings from a partial mapping; missing or None entries keep defaults."""
        if not values:
            return cls()
        known = {f.name for f in fields(cls)}
        provided = {k: v for k, v in values.items() if k in known and v is not None}
        return cls(**provided)
