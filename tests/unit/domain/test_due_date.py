from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

from src.domain.models.breeding_record import BreedingRecord
from src.domain.models.breeding_settings import BreedingSettings
from src.domain.models.calving_event import CalvingEvent
from src.domain.models.insemination import InseminationEvent
from src.domain.models.pregnancy_check import PregnancyCheck
from src.domain.services.breeding_timeline import ActivePregnancy, build_timeline
from src.domain.services.due_date import (
    from_calving_estimate,
    from_gestation_period,
    from_legacy_record,
    pregnancy_start,
    resolve_due_date,
)

ANIMAL_ID = uuid4()
SETTINGS = BreedingSettings()


def test_legacy_expected_date_wins_over_calving_estimate():
    legacy_due = date(2026, 4, 2)
    record = BreedingRecord(
        animal_id=ANIMAL_ID,
        breeding_date=date(2025, 6, 26),
        pregnancy_status="confirmed",
        expected_calving_date=legacy_due,
    )
    calving = CalvingEvent(
        animal_id=ANIMAL_ID,
        event_date=datetime(2025, 7, 1, tzinfo=timezone.utc),
        estimated_due_date=date(2026, 4, 20),
    )
    service = InseminationEvent(
        animal_id=ANIMAL_ID, event_date=datetime(2025, 6, 20, tzinfo=timezone.utc)
    )
    timeline = build_timeline(
        inseminations=[service], calvings=[calving], breeding_records=[record]
    )

    due = resolve_due_date(timeline, SETTINGS, ActivePregnancy(record=record))

    assert due == legacy_due


def test_calving_estimate_used_when_record_has_no_date():
    record = BreedingRecord(
        animal_id=ANIMAL_ID, breeding_date=date(2025, 6, 26), pregnancy_status="confirmed"
    )
    calving = CalvingEvent(
        animal_id=ANIMAL_ID,
        event_date=datetime(2025, 7, 1, tzinfo=timezone.utc),
        estimated_due_date=date(2026, 4, 20),
    )
    timeline = build_timeline(calvings=[calving], breeding_records=[record])

    assert resolve_due_date(timeline, SETTINGS, ActivePregnancy(record=record)) == date(2026, 4, 20)


def test_calving_estimate_from_before_the_service_is_ignored():
    record = BreedingRecord(
        animal_id=ANIMAL_ID, breeding_date=date(2025, 6, 26), pregnancy_status="confirmed"
    )
    calving = CalvingEvent(
        animal_id=ANIMAL_ID,
        event_date=datetime(2025, 3, 1, tzinfo=timezone.utc),
        estimated_due_date=date(2025, 2, 27),
    )
    service = InseminationEvent(
        animal_id=ANIMAL_ID, event_date=datetime(2025, 6, 26, tzinfo=timezone.utc)
    )
    timeline = build_timeline(
        inseminations=[service], calvings=[calving], breeding_records=[record]
    )

    due = resolve_due_date(timeline, SETTINGS, ActivePregnancy(record=record))

    assert due == date(2025, 6, 26) + timedelta(days=280)


def test_check_based_pregnancy_starts_at_latest_insemination():
    calving = CalvingEvent(
        animal_id=ANIMAL_ID,
        event_date=datetime(2025, 9, 1, tzinfo=timezone.utc),
        estimated_due_date=date(2025, 8, 30),
    )
    service = InseminationEvent(
        animal_id=ANIMAL_ID, event_date=datetime(2025, 11, 10, tzinfo=timezone.utc)
    )
    check = PregnancyCheck(
        animal_id=ANIMAL_ID,
        check_date=datetime(2025, 12, 20, tzinfo=timezone.utc),
        result="positive",
    )
    timeline = build_timeline(inseminations=[service], pregnancy_checks=[check], calvings=[calving])

    assert pregnancy_start(timeline, ActivePregnancy(check=check)) == datetime(
        2025, 11, 10, tzinfo=timezone.utc
    )
    assert from_calving_estimate(timeline, SETTINGS, ActivePregnancy(check=check)) is None


def test_newest_calving_carrying_an_estimate_is_used():
    calvings = [
        CalvingEvent(
            animal_id=ANIMAL_ID,
            event_date=datetime(2024, 3, 1, tzinfo=timezone.utc),
            estimated_due_date=date(2024, 2, 25),
        ),
        CalvingEvent(
            animal_id=ANIMAL_ID,
            event_date=datetime(2025, 3, 1, tzinfo=timezone.utc),
            estimated_due_date=date(2025, 2, 27),
        ),
        CalvingEvent(animal_id=ANIMAL_ID, event_date=datetime(2025, 12, 1, tzinfo=timezone.utc)),
    ]
    timeline = build_timeline(calvings=calvings)

    assert from_calving_estimate(timeline, SETTINGS, None) == date(2025, 2, 27)


def test_gestation_projection_from_latest_insemination():
    service = InseminationEvent(
        animal_id=ANIMAL_ID, event_date=datetime(2026, 1, 1, 10, 0, tzinfo=timezone.utc)
    )
    check = PregnancyCheck(
        animal_id=ANIMAL_ID,
        check_date=datetime(2026, 2, 5, tzinfo=timezone.utc),
        result="positive",
    )
    timeline = build_timeline(inseminations=[service], pregnancy_checks=[check])

    due = resolve_due_date(timeline, SETTINGS, ActivePregnancy(check=check))

    assert due == date(2026, 1, 1) + timedelta(days=280)


def test_gestation_projection_honours_configured_period():
    service = InseminationEvent(
        animal_id=ANIMAL_ID, event_date=datetime(2026, 1, 1, tzinfo=timezone.utc)
    )
    timeline = build_timeline(inseminations=[service])
    settings = BreedingSettings(default_gestation_period_days=283)

    assert from_gestation_period(timeline, settings, None) == date(2026, 10, 11)


def test_no_source_resolves_to_none():
    check = PregnancyCheck(
        animal_id=ANIMAL_ID,
        check_date=datetime(2026, 2, 5, tzinfo=timezone.utc),
        result="positive",
    )
    timeline = build_timeline(pregnancy_checks=[check])

    assert resolve_due_date(timeline, SETTINGS, ActivePregnancy(check=check)) is None
    assert from_legacy_record(timeline, SETTINGS, None) is None


def test_custom_strategy_order_is_respected():
    record = BreedingRecord(
        animal_id=ANIMAL_ID,
        breeding_date=date(2025, 6, 26),
        pregnancy_status="confirmed",
        expected_calving_date=date(2026, 4, 2),
    )
    service = InseminationEvent(
        animal_id=ANIMAL_ID, event_date=datetime(2025, 6, 20, tzinfo=timezone.utc)
    )
    timeline = build_timeline(inseminations=[service], breeding_records=[record])

    due = resolve_due_date(
        timeline,
        SETTINGS,
        ActivePregnancy(record=record),
        strategies=(from_gestation_period, from_legacy_record),
    )

    assert due == date(2025, 6, 20) + timedelta(days=280)
