from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.animal import Animal


class AnimalRepository(Protocol):
    async def get(self, tenant_id: UUID, animal_id: UUID) -> Animal | None: ...

    async def list_active(self, tenant_id: UUID) -> list[Animal]: ...
