from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.breeding.load_breeding_context import load_settings, load_timeline
from src.domain.models.animal import Animal
from src.domain.models.breeding_settings import BreedingSettings
from src.domain.models.window_status import CalvingOutlook
from src.domain.services.breeding_timeline import BreedingTimeline, find_active_pregnancy
from src.domain.services.due_date import pregnancy_start, resolve_due_date
from src.domain.services.window_status import CALVING_WINDOW_DAYS
from src.utils.datetime_tz import utc_day, whole_days_between

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PregnantAnimal:
    animal: Animal
    conception_date: date | None
    due_date: date | None
    days_pregnant: int | None
    days_until_due: int | None
    outlook: CalvingOutlook


def summarize_pregnancy(
    animal: Animal,
    timeline: BreedingTimeline,
    settings: BreedingSettings,
    now: datetime,
) -> PregnantAnimal | None:
    pregnancy = find_active_pregnancy(timeline)
    if pregnancy is None:
        return None
    start = pregnancy_start(timeline, pregnancy)
    due = resolve_due_date(timeline, settings, pregnancy)
    days_until_due = (due - utc_day(now)).days if due is not None else None
    if days_until_due is None or days_until_due > CALVING_WINDOW_DAYS:
        outlook = CalvingOutlook.NORMAL
    elif days_until_due < 0:
        outlook = CalvingOutlook.OVERDUE
    else:
        outlook = CalvingOutlook.DUE_SOON
    return PregnantAnimal(
        animal=animal,
        conception_date=start.date() if start is not None else None,
        due_date=due,
        days_pregnant=whole_days_between(start, now) if start is not None else None,
        days_until_due=days_until_due,
        outlook=outlook,
    )


def calving_order(item: PregnantAnimal) -> tuple[bool, date, str]:
    # Undated pregnancies go last
    return item.due_date is None, item.due_date or date.max, item.animal.tag


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    now: datetime,
) -> list[PregnantAnimal]:
    """Open pregnancies of the herd, soonest calving first."""
    settings = await load_settings(uow, tenant_id)
    animals = await uow.animals.list_active(tenant_id)
    items: list[PregnantAnimal] = []
    for animal in animals:
        timeline = await load_timeline(uow, tenant_id, animal.id)
        item = summarize_pregnancy(animal, timeline, settings, now)
        if item is not None:
            items.append(item)
    items.sort(key=calving_order)
    logger.debug("Found %d open pregnancies across %d animals", len(items), len(animals))
    return items
