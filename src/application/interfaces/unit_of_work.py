from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.animals import AnimalRepository
from src.application.interfaces.repositories.breeding_events import BreedingEventsRepository
from src.application.interfaces.repositories.breeding_settings import (
    BreedingSettingsRepository,
)


class UnitOfWork(Protocol):
    animals: AnimalRepository
    breeding_events: BreedingEventsRepository
    breeding_settings: BreedingSettingsRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
