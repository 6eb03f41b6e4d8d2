from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.breeding import load_breeding_context
from src.domain.models.eligibility import Eligibility
from src.domain.services.eligibility import evaluate_eligibility

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    animal_id: UUID,
    now: datetime,
) -> Eligibility:
    context = await load_breeding_context.execute(uow, tenant_id, animal_id)
    result = evaluate_eligibility(context.animal, context.settings, context.timeline, now)
    logger.debug(
        "Eligibility for animal %s: eligible=%s reasons=%d",
        animal_id,
        result.eligible,
        len(result.reasons),
    )
    return result
