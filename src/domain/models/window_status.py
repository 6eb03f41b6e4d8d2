from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class WindowState(str, Enum):
    POST_CALVING = "post_calving"
    READY_TO_REBREED = "ready_to_rebreed"
    CALVING = "calving"
    PREGNANT = "pregnant"
    READY_FOR_CHECK = "ready_for_check"
    WAITING = "waiting"
    # Heat buckets
    EARLY = "early"
    APPROACHING = "approaching"
    OPTIMAL = "optimal"
    LATE = "late"
    EXPIRED = "expired"


class WindowAction(str, Enum):
    NONE = "none"
    BREED = "breed"
    CHECK = "check"
    CALVING = "calving"


class CalvingOutlook(str, Enum):
    NORMAL = "normal"
    DUE_SOON = "due_soon"
    OVERDUE = "overdue"


HEAT_COLORS: dict[WindowState, str] = {
    WindowState.EARLY: "blue",
    WindowState.APPROACHING: "yellow",
    WindowState.OPTIMAL: "green",
    WindowState.LATE: "orange",
    WindowState.EXPIRED: "red",
}


@dataclass(frozen=True, slots=True)
class WindowStatus:
    status: WindowState
    action: WindowAction
    message: str
    color: str | None = None
    days_remaining: int | None = None
    days_since_calving: int | None = None
    days_since_insemination: int | None = None
    days_until_due: float | None = None
    due_date: date | None = None
    hours_elapsed: float | None = None
    event_date: datetime | None = None

    @property
    def requires_action(self) -> bool:
        return self.action is not WindowAction.NONE
