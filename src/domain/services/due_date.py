from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Callable

from src.domain.models.breeding_settings import BreedingSettings
from src.domain.services.breeding_timeline import ActivePregnancy, BreedingTimeline
from src.utils.datetime_tz import to_utc

DueDateStrategy = Callable[[BreedingTimeline, BreedingSettings, ActivePregnancy | None], date | None]


def from_legacy_record(
    timeline: BreedingTimeline,
    settings: BreedingSettings,
    pregnancy: ActivePregnancy | None,
) -> date | None:
    if pregnancy is None or pregnancy.record is None:
        return None
    return pregnancy.record.expected_calving_date


def pregnancy_start(timeline: BreedingTimeline, pregnancy: ActivePregnancy | None) -> datetime | None:
    """Instant the active pregnancy began: the legacy service date, else the
    latest insemination, else the confirming check."""
    if pregnancy is None:
        return None
    if pregnancy.record is not None:
        return to_utc(pregnancy.record.breeding_date)
    insemination = timeline.latest_insemination
    if insemination is not None:
        return to_utc(insemination.event_date)
    if pregnancy.check is not None:
        return to_utc(pregnancy.check.check_date)
    return None


def from_calving_estimate(
    timeline: BreedingTimeline,
    settings: BreedingSettings,
    pregnancy: ActivePregnancy | None,
) -> date | None:
    # Estimates recorded before the pregnancy began belong to a closed cycle
    start = pregnancy_start(timeline, pregnancy)
    for calving in timeline.calvings:
        if start is not None and to_utc(calving.event_date) < start:
            continue
        if calving.estimated_due_date is not None:
            return calving.estimated_due_date
    return None


def from_gestation_period(
    timeline: BreedingTimeline,
    settings: BreedingSettings,
    pregnancy: ActivePregnancy | None,
) -> date | None:
    insemination = timeline.latest_insemination
    if insemination is None:
        return None
    projected = to_utc(insemination.event_date) + timedelta(days=settings.default_gestation_period_days)
    return projected.date()


# Precedence order; the first strategy returning a date wins
DUE_DATE_STRATEGIES: tuple[DueDateStrategy, ...] = (
    from_legacy_record,
    from_calving_estimate,
    from_gestation_period,
)


def resolve_due_date(
    timeline: BreedingTimeline,
    settings: BreedingSettings,
    pregnancy: ActivePregnancy | None = None,
    strategies: tuple[DueDateStrategy, ...] = DUE_DATE_STRATEGIES,
) -> date | None:
    for strategy in strategies:
        due = strategy(timeline, settings, pregnancy)
        if due is not None:
            return due
    return None
