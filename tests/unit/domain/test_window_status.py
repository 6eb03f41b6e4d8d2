from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

import pytest

from src.domain.models.breeding_record import BreedingRecord
from src.domain.models.breeding_settings import BreedingSettings
from src.domain.models.calving_event import CalvingEvent
from src.domain.models.heat_event import HeatEvent
from src.domain.models.insemination import InseminationEvent
from src.domain.models.pregnancy_check import PregnancyCheck
from src.domain.models.window_status import WindowAction, WindowState
from src.domain.services.breeding_timeline import build_timeline
from src.domain.services.window_status import classify_window

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)
TODAY = NOW.date()
ANIMAL_ID = uuid4()
SETTINGS = BreedingSettings(
    pregnancy_check_wait_days=30,
    default_gestation_period_days=280,
    postpartum_breeding_delay_days=60,
)


def heat(hours_ago: float) -> HeatEvent:
    return HeatEvent(
        animal_id=ANIMAL_ID,
        event_date=NOW - timedelta(hours=hours_ago),
        heat_signs=("Standing to be mounted", "Clear mucus discharge"),
        action_taken="Marked for breeding",
    )


def insemination(days_ago: float) -> InseminationEvent:
    return InseminationEvent(animal_id=ANIMAL_ID, event_date=NOW - timedelta(days=days_ago))


def calving(days_ago: float) -> CalvingEvent:
    return CalvingEvent(animal_id=ANIMAL_ID, event_date=NOW - timedelta(days=days_ago))


def confirmed_record(expected: date | None) -> BreedingRecord:
    return BreedingRecord(
        animal_id=ANIMAL_ID,
        breeding_date=TODAY - timedelta(days=275),
        pregnancy_status="confirmed",
        expected_calving_date=expected,
    )


def test_recent_calving_reports_recovery_days():
    window = classify_window(build_timeline(calvings=[calving(10)]), SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.POST_CALVING
    assert window.action is WindowAction.NONE
    assert window.days_remaining == 50
    assert window.days_since_calving == 10


def test_post_calving_overrides_confirmed_pregnancy():
    timeline = build_timeline(
        calvings=[calving(5)],
        breeding_records=[confirmed_record(TODAY + timedelta(days=1))],
    )

    window = classify_window(timeline, SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.POST_CALVING
    assert window.days_remaining == 55


def test_calving_past_delay_without_new_events_is_ready_to_rebreed():
    window = classify_window(build_timeline(calvings=[calving(70)]), SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.READY_TO_REBREED
    assert window.action is WindowAction.NONE
    assert window.days_since_calving == 70


def test_heat_after_calving_moves_past_ready_to_rebreed():
    # The insemination predates the calving and was closed by it
    timeline = build_timeline(
        heats=[heat(14)],
        inseminations=[insemination(350)],
        calvings=[calving(70)],
    )

    window = classify_window(timeline, SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.OPTIMAL


def test_insemination_after_calving_starts_check_window():
    timeline = build_timeline(inseminations=[insemination(5)], calvings=[calving(80)])

    window = classify_window(timeline, SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.WAITING
    assert window.days_remaining == 25


@pytest.mark.parametrize(
    ("offset_days", "message"),
    [
        (0, "Due Today"),
        (1, "Due Tomorrow"),
        (5, "Due in 5 days"),
        (7, "Due in 7 days"),
    ],
)
def test_calving_window_messages_before_due_date(offset_days, message):
    timeline = build_timeline(breeding_records=[confirmed_record(TODAY + timedelta(days=offset_days))])

    window = classify_window(timeline, SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.CALVING
    assert window.action is WindowAction.CALVING
    assert window.message == message
    assert window.days_until_due == offset_days
    assert window.due_date == TODAY + timedelta(days=offset_days)


def test_overdue_less_than_a_day_reports_hours():
    timeline = build_timeline(breeding_records=[confirmed_record(TODAY - timedelta(days=1))])

    window = classify_window(timeline, SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.CALVING
    assert window.message == "Overdue by 12 hours"
    assert window.days_until_due == pytest.approx(-0.5)


def test_midnight_after_due_day_is_still_due_today():
    midnight = datetime(2026, 3, 15, tzinfo=timezone.utc)
    timeline = build_timeline(breeding_records=[confirmed_record(date(2026, 3, 14))])

    window = classify_window(timeline, SETTINGS, midnight)

    assert window is not None
    assert window.status is WindowState.CALVING
    assert window.message == "Due Today"
    assert window.days_until_due == 0


def test_overdue_by_days():
    timeline = build_timeline(breeding_records=[confirmed_record(TODAY - timedelta(days=3))])

    window = classify_window(timeline, SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.CALVING
    assert window.message == "Overdue by 2 days"
    assert window.days_until_due == pytest.approx(-2.5)


def test_far_from_due_date_is_pregnant_without_action():
    timeline = build_timeline(breeding_records=[confirmed_record(TODAY + timedelta(days=30))])

    window = classify_window(timeline, SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.PREGNANT
    assert window.action is WindowAction.NONE
    assert window.days_until_due == 30
    assert window.message == "Pregnant - due in 30 days"


def test_long_overdue_is_pregnant_without_action():
    timeline = build_timeline(breeding_records=[confirmed_record(TODAY - timedelta(days=10))])

    window = classify_window(timeline, SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.PREGNANT
    assert window.action is WindowAction.NONE
    assert window.days_until_due < -7


def test_positive_check_projects_due_date_from_insemination():
    timeline = build_timeline(
        inseminations=[insemination(250)],
        pregnancy_checks=[
            PregnancyCheck(
                animal_id=ANIMAL_ID, check_date=NOW - timedelta(days=200), result="positive"
            )
        ],
    )

    window = classify_window(timeline, SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.PREGNANT
    assert window.due_date == TODAY + timedelta(days=30)


def test_new_pregnancy_ignores_estimate_from_previous_calving():
    previous = CalvingEvent(
        animal_id=ANIMAL_ID,
        event_date=NOW - timedelta(days=100),
        estimated_due_date=TODAY - timedelta(days=102),
    )
    timeline = build_timeline(
        inseminations=[insemination(60)],
        pregnancy_checks=[
            PregnancyCheck(
                animal_id=ANIMAL_ID, check_date=NOW - timedelta(days=20), result="positive"
            )
        ],
        calvings=[previous],
    )

    window = classify_window(timeline, SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.PREGNANT
    assert window.due_date == date(2026, 10, 21)
    assert window.days_until_due == 220


def test_undated_pregnancy_shows_nothing():
    timeline = build_timeline(
        heats=[heat(14)],
        pregnancy_checks=[
            PregnancyCheck(
                animal_id=ANIMAL_ID, check_date=NOW - timedelta(days=40), result="positive"
            )
        ],
    )

    assert classify_window(timeline, SETTINGS, NOW) is None


def test_insemination_past_wait_is_ready_for_check():
    window = classify_window(build_timeline(inseminations=[insemination(35)]), SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.READY_FOR_CHECK
    assert window.action is WindowAction.CHECK
    assert window.days_since_insemination == 35


def test_insemination_before_wait_is_waiting():
    window = classify_window(build_timeline(inseminations=[insemination(10)]), SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.WAITING
    assert window.action is WindowAction.NONE
    assert window.days_remaining == 20


def test_insemination_older_than_gestation_silently_expires():
    timeline = build_timeline(heats=[heat(14)], inseminations=[insemination(300)])

    assert classify_window(timeline, SETTINGS, NOW) is None


def test_negative_check_after_insemination_falls_through_to_heat():
    timeline = build_timeline(
        heats=[heat(14)],
        inseminations=[insemination(40)],
        pregnancy_checks=[
            PregnancyCheck(
                animal_id=ANIMAL_ID, check_date=NOW - timedelta(days=5), result="negative"
            )
        ],
    )

    window = classify_window(timeline, SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.OPTIMAL


def test_heat_fourteen_hours_ago_is_optimal():
    window = classify_window(build_timeline(heats=[heat(14)]), SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.OPTIMAL
    assert window.color == "green"
    assert window.action is WindowAction.BREED
    assert window.hours_elapsed == pytest.approx(14)


@pytest.mark.parametrize(
    ("hours", "state", "color"),
    [
        (0, WindowState.EARLY, "blue"),
        (7.9, WindowState.EARLY, "blue"),
        (8, WindowState.APPROACHING, "yellow"),
        (11.5, WindowState.APPROACHING, "yellow"),
        (12, WindowState.OPTIMAL, "green"),
        (18, WindowState.OPTIMAL, "green"),
        (18.5, WindowState.LATE, "orange"),
        (24, WindowState.LATE, "orange"),
        (24.5, WindowState.EXPIRED, "red"),
        (35.99, WindowState.EXPIRED, "red"),
    ],
)
def test_heat_buckets(hours, state, color):
    window = classify_window(build_timeline(heats=[heat(hours)]), SETTINGS, NOW)

    assert window is not None
    assert window.status is state
    assert window.color == color
    assert window.action is WindowAction.BREED


@pytest.mark.parametrize("hours", [36.0, 40, 72])
def test_heat_past_hard_cutoff_shows_nothing(hours):
    assert classify_window(build_timeline(heats=[heat(hours)]), SETTINGS, NOW) is None


def test_heat_answered_by_same_day_legacy_breeding_shows_nothing():
    record = BreedingRecord(animal_id=ANIMAL_ID, breeding_date=TODAY, pregnancy_status="pending")

    timeline = build_timeline(heats=[heat(10)], breeding_records=[record])

    assert classify_window(timeline, SETTINGS, NOW) is None


def test_heat_answered_on_heat_calendar_day_shows_nothing():
    # Heat at 16:00 yesterday, service recorded against yesterday's date
    record = BreedingRecord(
        animal_id=ANIMAL_ID, breeding_date=TODAY - timedelta(days=1), pregnancy_status="pending"
    )

    timeline = build_timeline(heats=[heat(20)], breeding_records=[record])

    assert classify_window(timeline, SETTINGS, NOW) is None


def test_older_legacy_breeding_does_not_answer_new_heat():
    record = BreedingRecord(
        animal_id=ANIMAL_ID, breeding_date=TODAY - timedelta(days=21), pregnancy_status="negative"
    )

    window = classify_window(build_timeline(heats=[heat(10)], breeding_records=[record]), SETTINGS, NOW)

    assert window is not None
    assert window.status is WindowState.APPROACHING


def test_no_events_shows_nothing():
    assert classify_window(build_timeline(), SETTINGS, NOW) is None


def test_classification_is_deterministic():
    timeline = build_timeline(heats=[heat(30)], calvings=[calving(400)])
    settings = BreedingSettings()

    results = {classify_window(timeline, settings, NOW) for _ in range(3)}

    assert len(results) == 1
    assert results.pop().status is WindowState.EXPIRED
