from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.breeding.load_breeding_context import load_settings, load_timeline
from src.domain.models.animal import Animal
from src.domain.models.window_status import WindowAction, WindowStatus
from src.domain.services.window_status import classify_window

logger = logging.getLogger(__name__)

ACTION_PRIORITY = {
    WindowAction.CALVING: 0,
    WindowAction.CHECK: 1,
    WindowAction.BREED: 2,
}


@dataclass(slots=True)
class ActionItem:
    animal: Animal
    window: WindowStatus


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    now: datetime,
) -> list[ActionItem]:
    """Animals of the herd whose current window asks the user to act."""
    settings = await load_settings(uow, tenant_id)
    animals = await uow.animals.list_active(tenant_id)
    items: list[ActionItem] = []
    for animal in animals:
        timeline = await load_timeline(uow, tenant_id, animal.id)
        window = classify_window(timeline, settings, now)
        if window is not None and window.requires_action:
            items.append(ActionItem(animal=animal, window=window))
    items.sort(key=lambda item: (ACTION_PRIORITY[item.window.action], item.animal.tag))
    logger.debug("Found %d breeding action items across %d animals", len(items), len(animals))
    return items
