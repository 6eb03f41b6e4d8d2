from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal
from src.domain.models.breeding_settings import BreedingSettings
from src.domain.services.breeding_timeline import BreedingTimeline, build_timeline


@dataclass(slots=True)
class BreedingContext:
    animal: Animal
    settings: BreedingSettings
    timeline: BreedingTimeline


async def load_settings(uow: UnitOfWork, tenant_id: UUID) -> BreedingSettings:
    settings = await uow.breeding_settings.get(tenant_id)
    return settings or BreedingSettings()


async def load_timeline(uow: UnitOfWork, tenant_id: UUID, animal_id: UUID) -> BreedingTimeline:
    repo = uow.breeding_events
    # Sequential awaits: all repositories share one session
    heats = await repo.list_heats(tenant_id, animal_id)
    inseminations = await repo.list_inseminations(tenant_id, animal_id)
    checks = await repo.list_pregnancy_checks(tenant_id, animal_id)
    calvings = await repo.list_calvings(tenant_id, animal_id)
    records = await repo.list_breeding_records(tenant_id, animal_id)
    return build_timeline(
        heats=heats,
        inseminations=inseminations,
        pregnancy_checks=checks,
        calvings=calvings,
        breeding_records=records,
    )


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    animal_id: UUID,
    settings: BreedingSettings | None = None,
) -> BreedingContext:
    animal = await uow.animals.get(tenant_id, animal_id)
    if animal is None:
        raise NotFound(f"Animal {animal_id} not found")
    if settings is None:
        settings = await load_settings(uow, tenant_id)
    timeline = await load_timeline(uow, tenant_id, animal_id)
    return BreedingContext(animal=animal, settings=settings, timeline=timeline)
