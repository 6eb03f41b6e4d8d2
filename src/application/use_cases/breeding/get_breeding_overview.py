from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.breeding import load_breeding_context
from src.domain.models.animal import Animal
from src.domain.models.breeding_settings import BreedingSettings
from src.domain.models.eligibility import Eligibility
from src.domain.models.window_status import WindowStatus
from src.domain.services.breeding_timeline import BreedingTimeline
from src.domain.services.eligibility import evaluate_eligibility
from src.domain.services.window_status import classify_window


@dataclass(slots=True)
class BreedingOverview:
    animal: Animal
    settings: BreedingSettings
    timeline: BreedingTimeline
    eligibility: Eligibility
    window: WindowStatus | None


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    animal_id: UUID,
    now: datetime,
) -> BreedingOverview:
    context = await load_breeding_context.execute(uow, tenant_id, animal_id)
    return BreedingOverview(
        animal=context.animal,
        settings=context.settings,
        timeline=context.timeline,
        eligibility=evaluate_eligibility(context.animal, context.settings, context.timeline, now),
        window=classify_window(context.timeline, context.settings, now),
    )
