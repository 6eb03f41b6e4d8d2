from __future__ import annotations

from datetime import date, datetime, timedelta

from src.domain.models.breeding_settings import BreedingSettings
from src.domain.models.calving_event import CalvingEvent
from src.domain.models.heat_event import HeatEvent
from src.domain.models.window_status import HEAT_COLORS, WindowAction, WindowState, WindowStatus
from src.domain.services.breeding_timeline import BreedingTimeline, find_active_pregnancy
from src.domain.services.due_date import resolve_due_date
from src.utils.datetime_tz import ONE_DAY, ONE_HOUR, hours_between, to_utc, utc_day, whole_days_between

# Days either side of the due date during which the calving action is offered
CALVING_WINDOW_DAYS = 7
# Heat observations older than this are no longer actionable
HEAT_HARD_CUTOFF_HOURS = 36.0


def classify_window(
    timeline: BreedingTimeline,
    settings: BreedingSettings,
    now: datetime,
) -> WindowStatus | None:
    """Return the single reproductive window the animal is in at `now`.

    Rules are tried in priority order and the first one that applies decides
    the result, including when it decides there is nothing to show (None).
    """
    calving = timeline.latest_calving
    if calving is not None:
        days = whole_days_between(calving.event_date, now)
        delay = settings.postpartum_breeding_delay_days
        if days < delay:
            return WindowStatus(
                status=WindowState.POST_CALVING,
                action=WindowAction.NONE,
                message=f"Post-calving recovery: {delay - days} days until breeding is allowed",
                days_remaining=delay - days,
                days_since_calving=days,
                event_date=calving.event_date,
            )
        if not _cycle_advanced_since(timeline, calving):
            return WindowStatus(
                status=WindowState.READY_TO_REBREED,
                action=WindowAction.NONE,
                message=f"Ready to rebreed ({days} days since calving)",
                days_since_calving=days,
                event_date=calving.event_date,
            )

    pregnancy = find_active_pregnancy(timeline)
    if pregnancy is not None:
        due = resolve_due_date(timeline, settings, pregnancy)
        if due is None:
            return None
        return _pregnancy_window(due, now)

    insemination = timeline.latest_insemination
    if insemination is not None and not _closed_by_calving(insemination.event_date, calving):
        served_at = to_utc(insemination.event_date)
        checked = any(to_utc(c.check_date) > served_at for c in timeline.pregnancy_checks)
        if not checked:
            days = whole_days_between(served_at, now)
            if days > settings.default_gestation_period_days:
                return None
            wait = settings.pregnancy_check_wait_days
            if days >= wait:
                return WindowStatus(
                    status=WindowState.READY_FOR_CHECK,
                    action=WindowAction.CHECK,
                    message=f"Pregnancy check due ({days} days since insemination)",
                    days_since_insemination=days,
                    event_date=insemination.event_date,
                )
            return WindowStatus(
                status=WindowState.WAITING,
                action=WindowAction.NONE,
                message=f"Pregnancy check in {wait - days} days",
                days_remaining=wait - days,
                days_since_insemination=days,
                event_date=insemination.event_date,
            )

    heat = timeline.latest_heat
    if heat is not None:
        return _heat_window(timeline, heat, now)
    return None


def _closed_by_calving(served_at: datetime, calving: CalvingEvent | None) -> bool:
    return calving is not None and to_utc(calving.event_date) >= to_utc(served_at)


def _cycle_advanced_since(timeline: BreedingTimeline, calving: CalvingEvent) -> bool:
    return any(e.kind != CalvingEvent.kind for e in timeline.events_after(calving.event_date))


def _pregnancy_window(due: date, now: datetime) -> WindowStatus:
    calendar_days = (due - utc_day(now)).days
    if calendar_days >= 0:
        days_until_due: float = calendar_days
        if calendar_days > 1:
            message = f"Due in {calendar_days} days"
        elif calendar_days == 1:
            message = "Due Tomorrow"
        else:
            message = "Due Today"
    else:
        # Overdue time counts from the end of the due day
        overdue = to_utc(now) - (to_utc(due) + ONE_DAY)
        days_until_due = -(overdue / ONE_DAY)
        if overdue <= timedelta(0):
            days_until_due = 0
            message = "Due Today"
        elif days_until_due > -1:
            message = f"Overdue by {int(overdue / ONE_HOUR)} hours"
        else:
            message = f"Overdue by {int(overdue / ONE_DAY)} days"

    if -CALVING_WINDOW_DAYS <= days_until_due <= CALVING_WINDOW_DAYS:
        return WindowStatus(
            status=WindowState.CALVING,
            action=WindowAction.CALVING,
            message=message,
            days_until_due=days_until_due,
            due_date=due,
        )
    if days_until_due > 0:
        text = f"Pregnant - due in {calendar_days} days"
    else:
        text = f"Pregnant - calving {message.lower()}"
    return WindowStatus(
        status=WindowState.PREGNANT,
        action=WindowAction.NONE,
        message=text,
        days_until_due=days_until_due,
        due_date=due,
    )


def _heat_window(timeline: BreedingTimeline, heat: HeatEvent, now: datetime) -> WindowStatus | None:
    heat_day = utc_day(heat.event_date)
    if any(utc_day(i.event_date) >= heat_day for i in timeline.inseminations):
        return None
    if any(r.breeding_date >= heat_day for r in timeline.breeding_records):
        return None

    hours = hours_between(heat.event_date, now)
    if hours >= HEAT_HARD_CUTOFF_HOURS:
        return None
    if hours < 8:
        state, message = WindowState.EARLY, "Early heat - breed in 8-12 hours"
    elif hours < 12:
        state, message = WindowState.APPROACHING, "Approaching optimal breeding time"
    elif hours <= 18:
        state, message = WindowState.OPTIMAL, "Optimal breeding window - breed now"
    elif hours <= 24:
        state, message = WindowState.LATE, "Late in heat - breed as soon as possible"
    else:
        state, message = WindowState.EXPIRED, "Breeding window has likely passed"
    return WindowStatus(
        status=state,
        action=WindowAction.BREED,
        message=f"{message} ({int(hours)} hours since heat detected)",
        color=HEAT_COLORS[state],
        hours_elapsed=hours,
        event_date=heat.event_date,
    )
