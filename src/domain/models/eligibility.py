from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(slots=True)
class Eligibility:
    eligible: bool
    age_in_months: int
    production_status: str | None = None
    # Blocking; any entry means eligible is False
    reasons: list[str] = field(default_factory=list)
    # Never blocking
    warnings: list[str] = field(default_factory=list)
    days_since_calving: int | None = None
    next_breeding_date: date | None = None
    is_ready_for_first_service: bool = False
    is_ready_for_re_service: bool = False
