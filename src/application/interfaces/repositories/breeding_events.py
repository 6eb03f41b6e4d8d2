from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.breeding_record import BreedingRecord
from src.domain.models.calving_event import CalvingEvent
from src.domain.models.heat_event import HeatEvent
from src.domain.models.insemination import InseminationEvent
from src.domain.models.pregnancy_check import PregnancyCheck


class BreedingEventsRepository(Protocol):
    """Read side of the per-animal reproductive history.

    Results come back in storage order; callers must not rely on any sorting.
    """

    async def list_heats(self, tenant_id: UUID, animal_id: UUID) -> list[HeatEvent]: ...

    async def list_inseminations(
        self, tenant_id: UUID, animal_id: UUID
    ) -> list[InseminationEvent]: ...

    async def list_pregnancy_checks(
        self, tenant_id: UUID, animal_id: UUID
    ) -> list[PregnancyCheck]: ...

    async def list_calvings(self, tenant_id: UUID, animal_id: UUID) -> list[CalvingEvent]: ...

    async def list_breeding_records(
        self, tenant_id: UUID, animal_id: UUID
    ) -> list[BreedingRecord]: ...
