from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Sequence, TypeVar, Union

from src.domain.models.breeding_record import BreedingRecord
from src.domain.models.calving_event import CalvingEvent
from src.domain.models.heat_event import HeatEvent
from src.domain.models.insemination import InseminationEvent
from src.domain.models.pregnancy_check import PregnancyCheck
from src.utils.datetime_tz import to_utc

BreedingEvent = Union[HeatEvent, InseminationEvent, PregnancyCheck, CalvingEvent, BreedingRecord]

E = TypeVar("E", HeatEvent, InseminationEvent, PregnancyCheck, CalvingEvent, BreedingRecord)


def most_recent_first(events: Iterable[E]) -> tuple[E, ...]:
    """Sort events newest first.

    Insertion time (`created_at`) is used only when every event carries one;
    otherwise the event's own date decides. Equal keys keep input order.
    """
    items = list(events)
    if not items:
        return ()
    use_created = all(e.created_at is not None for e in items)

    def sort_key(pair: tuple[int, E]) -> tuple[datetime, int]:
        index, event = pair
        instant = event.created_at if use_created else event.timestamp()
        return to_utc(instant), -index

    ordered = sorted(enumerate(items), key=sort_key, reverse=True)
    return tuple(event for _, event in ordered)


@dataclass(frozen=True, slots=True)
class BreedingTimeline:
    heats: tuple[HeatEvent, ...] = ()
    inseminations: tuple[InseminationEvent, ...] = ()
    pregnancy_checks: tuple[PregnancyCheck, ...] = ()
    calvings: tuple[CalvingEvent, ...] = ()
    breeding_records: tuple[BreedingRecord, ...] = ()

    @property
    def latest_heat(self) -> HeatEvent | None:
        return self.heats[0] if self.heats else None

    @property
    def latest_insemination(self) -> InseminationEvent | None:
        return self.inseminations[0] if self.inseminations else None

    @property
    def latest_pregnancy_check(self) -> PregnancyCheck | None:
        return self.pregnancy_checks[0] if self.pregnancy_checks else None

    @property
    def latest_calving(self) -> CalvingEvent | None:
        return self.calvings[0] if self.calvings else None

    @property
    def latest_breeding_record(self) -> BreedingRecord | None:
        return self.breeding_records[0] if self.breeding_records else None

    @property
    def has_any_service(self) -> bool:
        return bool(self.inseminations or self.breeding_records)

    def events(self) -> list[BreedingEvent]:
        """Every event merged into one stream, newest event date first."""
        merged: list[BreedingEvent] = [
            *self.heats,
            *self.inseminations,
            *self.pregnancy_checks,
            *self.calvings,
            *self.breeding_records,
        ]
        return sorted(merged, key=lambda e: to_utc(e.timestamp()), reverse=True)

    def events_after(self, instant: date | datetime) -> list[BreedingEvent]:
        cutoff = to_utc(instant)
        return [e for e in self.events() if to_utc(e.timestamp()) > cutoff]


def build_timeline(
    heats: Sequence[HeatEvent] = (),
    inseminations: Sequence[InseminationEvent] = (),
    pregnancy_checks: Sequence[PregnancyCheck] = (),
    calvings: Sequence[CalvingEvent] = (),
    breeding_records: Sequence[BreedingRecord] = (),
) -> BreedingTimeline:
    return BreedingTimeline(
        heats=most_recent_first(heats),
        inseminations=most_recent_first(inseminations),
        pregnancy_checks=most_recent_first(pregnancy_checks),
        calvings=most_recent_first(calvings),
        breeding_records=most_recent_first(breeding_records),
    )


@dataclass(frozen=True, slots=True)
class ActivePregnancy:
    record: BreedingRecord | None = None
    check: PregnancyCheck | None = None


def _calved_after(timeline: BreedingTimeline, instant: date | datetime) -> bool:
    cutoff = to_utc(instant)
    return any(to_utc(c.event_date) > cutoff for c in timeline.calvings)


def find_active_pregnancy(timeline: BreedingTimeline) -> ActivePregnancy | None:
    """Return the open pregnancy of the timeline, if any.

    A legacy record counts while it is confirmed, has no actual calving date
    and no calving event followed its service. A check counts when it is the
    latest one, is positive, postdates the latest insemination and no calving
    followed it.
    """
    for record in timeline.breeding_records:
        if record.is_open_confirmed and not _calved_after(timeline, record.breeding_date):
            return ActivePregnancy(record=record)

    check = timeline.latest_pregnancy_check
    if check is None or not check.is_positive:
        return None
    insemination = timeline.latest_insemination
    if insemination is not None and to_utc(check.check_date) <= to_utc(insemination.event_date):
        return None
    if _calved_after(timeline, check.check_date):
        return None
    return ActivePregnancy(check=check)


def last_calving_instant(timeline: BreedingTimeline) -> datetime | None:
    """Most recent calving across the legacy records and the calving stream.

    The calving event replaces the legacy date only when strictly later.
    """
    legacy_dates = [r.actual_calving_date for r in timeline.breeding_records if r.actual_calving_date]
    legacy = to_utc(max(legacy_dates)) if legacy_dates else None
    event = timeline.latest_calving
    event_instant = to_utc(event.event_date) if event else None
    if legacy is None:
        return event_instant
    if event_instant is not None and event_instant > legacy:
        return event_instant
    return legacy


def last_service_instant(timeline: BreedingTimeline) -> datetime | None:
    candidates = [to_utc(i.event_date) for i in timeline.inseminations]
    candidates.extend(to_utc(r.breeding_date) for r in timeline.breeding_records)
    return max(candidates) if candidates else None
