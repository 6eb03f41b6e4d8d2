from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.breeding_settings import (
    BreedingSettingsRepository,
)
from src.domain.models.breeding_settings import BreedingSettings
from src.infrastructure.db.orm.breeding_settings import BreedingSettingsORM


class BreedingSettingsSQLAlchemyRepository(BreedingSettingsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedingSettingsORM) -> BreedingSettings:
        # Columns left NULL by the settings screen fall back to engine defaults
        return BreedingSettings.from_values(
            {
                "minimum_breeding_age_months": orm.minimum_breeding_age_months,
                "default_gestation_period_days": orm.default_gestation_period_days,
                "pregnancy_check_wait_days": orm.pregnancy_check_wait_days,
                "postpartum_breeding_delay_days": orm.postpartum_breeding_delay_days,
                "heat_cycle_days": orm.heat_cycle_days,
                "auto_schedule_pregnancy_check": orm.auto_schedule_pregnancy_check,
            }
        )

    async def get(self, tenant_id: UUID) -> BreedingSettings | None:
        result = await self.session.execute(
            select(BreedingSettingsORM).where(BreedingSettingsORM.tenant_id == tenant_id)
        )
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
