from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.interfaces.unit_of_work import UnitOfWork


def create_engine(database_url: str, schema: str | None = None) -> AsyncEngine:
    engine = create_async_engine(database_url, echo=False, future=True)
    if schema:
        # ORM tables are declared schema-less and mapped onto the configured schema
        engine = engine.execution_options(schema_translate_map={None: schema})
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.animals = None
        self.breeding_events = None
        self.breeding_settings = None

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from src.infrastructure.repos.animals_sqlalchemy import AnimalsSQLAlchemyRepository
        from src.infrastructure.repos.breeding_events_sqlalchemy import (
            BreedingEventsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.breeding_settings_sqlalchemy import (
            BreedingSettingsSQLAlchemyRepository,
        )

        self.animals = AnimalsSQLAlchemyRepository(self.session)
        self.breeding_events = BreedingEventsSQLAlchemyRepository(self.session)
        self.breeding_settings = BreedingSettingsSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self.animals = None
            self.breeding_events = None
            self.breeding_settings = None

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
