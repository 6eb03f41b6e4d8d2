from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.breeding.list_pregnant_animals import summarize_pregnancy
from src.application.use_cases.breeding.load_breeding_context import load_settings, load_timeline
from src.domain.services.breeding_timeline import BreedingEvent
from src.utils.datetime_tz import to_utc, utc_day

logger = logging.getLogger(__name__)

TREND_PERIOD = timedelta(days=30)


@dataclass(slots=True)
class BreedingTrends:
    heat_detection: int
    insemination: int
    pregnancy: int


@dataclass(slots=True)
class BreedingStats:
    current_pregnant: int
    expected_calvings_this_month: int
    conception_rate: int
    recent_heat_detections: int
    total_inseminations: int
    total_pregnancy_checks: int
    total_calvings: int
    trends: BreedingTrends


def percent(part: int, whole: int) -> int:
    """Whole percentage, halves rounded up."""
    if whole == 0:
        return 0
    return math.floor(part * 100 / whole + 0.5)


def trend_percentage(current: int, previous: int) -> int:
    if previous == 0:
        return 100 if current > 0 else 0
    return percent(current - previous, previous)


def _period_counts(events: Iterable[BreedingEvent], now: datetime) -> tuple[int, int]:
    """Events in the last period up to ``now`` and in the period before it."""
    recent_start = now - TREND_PERIOD
    previous_start = recent_start - TREND_PERIOD
    recent = previous = 0
    for event in events:
        instant = to_utc(event.timestamp())
        if recent_start <= instant <= now:
            recent += 1
        elif previous_start <= instant < recent_start:
            previous += 1
    return recent, previous


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    now: datetime,
) -> BreedingStats:
    """Herd-level breeding figures for the dashboard.

    Event totals and the conception rate cover every recorded event of the
    active herd. Recent counts use the 30 days up to ``now`` and trends compare
    them with the 30 days before that.
    """
    now = to_utc(now)
    today = utc_day(now)

    settings = await load_settings(uow, tenant_id)
    animals = await uow.animals.list_active(tenant_id)

    pregnant = 0
    due_this_month = 0
    heats, inseminations, checks, calvings = [], [], [], []
    for animal in animals:
        timeline = await load_timeline(uow, tenant_id, animal.id)
        heats.extend(timeline.heats)
        inseminations.extend(timeline.inseminations)
        checks.extend(timeline.pregnancy_checks)
        calvings.extend(timeline.calvings)

        item = summarize_pregnancy(animal, timeline, settings, now)
        if item is None:
            continue
        pregnant += 1
        due = item.due_date
        if due is not None and (due.year, due.month) == (today.year, today.month):
            due_this_month += 1

    positive_checks = [c for c in checks if c.is_positive]
    recent_heats, previous_heats = _period_counts(heats, now)
    recent_services, previous_services = _period_counts(inseminations, now)
    recent_positive, previous_positive = _period_counts(positive_checks, now)

    stats = BreedingStats(
        current_pregnant=pregnant,
        expected_calvings_this_month=due_this_month,
        conception_rate=percent(len(positive_checks), len(checks)),
        recent_heat_detections=recent_heats,
        total_inseminations=len(inseminations),
        total_pregnancy_checks=len(checks),
        total_calvings=len(calvings),
        trends=BreedingTrends(
            heat_detection=trend_percentage(recent_heats, previous_heats),
            insemination=trend_percentage(recent_services, previous_services),
            pregnancy=trend_percentage(recent_positive, previous_positive),
        ),
    )
    logger.debug(
        "Breeding stats for %d animals: %d pregnant, %d due this month",
        len(animals),
        pregnant,
        due_this_month,
    )
    return stats
