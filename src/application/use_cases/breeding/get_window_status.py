from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.breeding import load_breeding_context
from src.domain.models.window_status import WindowStatus
from src.domain.services.window_status import classify_window

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    animal_id: UUID,
    now: datetime,
) -> WindowStatus | None:
    context = await load_breeding_context.execute(uow, tenant_id, animal_id)
    window = classify_window(context.timeline, context.settings, now)
    logger.debug(
        "Window for animal %s: %s",
        animal_id,
        window.status.value if window else "none",
    )
    return window
