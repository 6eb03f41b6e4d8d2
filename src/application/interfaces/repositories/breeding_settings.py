from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.breeding_settings import BreedingSettings


class BreedingSettingsRepository(Protocol):
    async def get(self, tenant_id: UUID) -> BreedingSettings | None: ...
