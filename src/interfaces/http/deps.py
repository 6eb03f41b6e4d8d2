from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import datetime, timezone
from uuid import UUID

from fastapi import Query, Request

from src.application.errors import PermissionDenied
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.utils.datetime_tz import to_utc


async def get_tenant_id(request: Request) -> UUID:
    tenant_id = getattr(request.state, "tenant_id", None)
    if tenant_id is None:
        raise PermissionDenied("Missing tenant header")
    return tenant_id


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_evaluation_time(
    at: datetime | None = Query(
        default=None,
        description="Instant to evaluate at; defaults to the current time",
    ),
) -> datetime:
    if at is None:
        return datetime.now(timezone.utc)
    return to_utc(at)
