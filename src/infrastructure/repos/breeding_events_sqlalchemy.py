from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.breeding_events import BreedingEventsRepository
from src.domain.models.breeding_record import BreedingRecord
from src.domain.models.calving_event import CalvingEvent
from src.domain.models.heat_event import HeatEvent
from src.domain.models.insemination import InseminationEvent
from src.domain.models.pregnancy_check import PregnancyCheck
from src.infrastructure.db.orm.breeding_record import BreedingRecordORM
from src.infrastructure.db.orm.calving_event import CalvingEventORM
from src.infrastructure.db.orm.heat_event import HeatEventORM
from src.infrastructure.db.orm.insemination import InseminationORM
from src.infrastructure.db.orm.pregnancy_check import PregnancyCheckORM


class BreedingEventsSQLAlchemyRepository(BreedingEventsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _rows(self, orm_cls, tenant_id: UUID, animal_id: UUID) -> list:
        stmt = (
            select(orm_cls)
            .where(orm_cls.tenant_id == tenant_id)
            .where(orm_cls.animal_id == animal_id)
            .where(orm_cls.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_heats(self, tenant_id: UUID, animal_id: UUID) -> list[HeatEvent]:
        rows = await self._rows(HeatEventORM, tenant_id, animal_id)
        return [
            HeatEvent(
                id=orm.id,
                animal_id=orm.animal_id,
                event_date=orm.event_date,
                heat_signs=tuple(orm.heat_signs or ()),
                action_taken=orm.action_taken,
                notes=orm.notes,
                created_at=orm.created_at,
            )
            for orm in rows
        ]

    async def list_inseminations(
        self, tenant_id: UUID, animal_id: UUID
    ) -> list[InseminationEvent]:
        rows = await self._rows(InseminationORM, tenant_id, animal_id)
        return [
            InseminationEvent(
                id=orm.id,
                animal_id=orm.animal_id,
                event_date=orm.event_date,
                method=orm.method,
                sire_code=orm.sire_code,
                technician=orm.technician,
                estimated_due_date=orm.estimated_due_date,
                notes=orm.notes,
                created_at=orm.created_at,
            )
            for orm in rows
        ]

    async def list_pregnancy_checks(
        self, tenant_id: UUID, animal_id: UUID
    ) -> list[PregnancyCheck]:
        rows = await self._rows(PregnancyCheckORM, tenant_id, animal_id)
        return [
            PregnancyCheck(
                id=orm.id,
                animal_id=orm.animal_id,
                check_date=orm.check_date,
                result=orm.result,
                method=orm.method,
                checked_by=orm.checked_by,
                estimated_due_date=orm.estimated_due_date,
                created_at=orm.created_at,
            )
            for orm in rows
        ]

    async def list_calvings(self, tenant_id: UUID, animal_id: UUID) -> list[CalvingEvent]:
        rows = await self._rows(CalvingEventORM, tenant_id, animal_id)
        return [
            CalvingEvent(
                id=orm.id,
                animal_id=orm.animal_id,
                event_date=orm.event_date,
                estimated_due_date=orm.estimated_due_date,
                outcome=orm.outcome,
                notes=orm.notes,
                created_at=orm.created_at,
            )
            for orm in rows
        ]

    async def list_breeding_records(
        self, tenant_id: UUID, animal_id: UUID
    ) -> list[BreedingRecord]:
        rows = await self._rows(BreedingRecordORM, tenant_id, animal_id)
        return [
            BreedingRecord(
                id=orm.id,
                animal_id=orm.animal_id,
                breeding_date=orm.breeding_date,
                method=orm.breeding_method,
                pregnancy_status=orm.pregnancy_status,
                expected_calving_date=orm.expected_calving_date,
                actual_calving_date=orm.actual_calving_date,
                created_at=orm.created_at,
            )
            for orm in rows
        ]
