from __future__ import annotations

from datetime import datetime, timedelta

from src.domain.models.animal import Animal
from src.domain.models.breeding_record import PregnancyStatus
from src.domain.models.breeding_settings import BreedingSettings
from src.domain.models.eligibility import Eligibility
from src.domain.services.breeding_timeline import (
    BreedingTimeline,
    find_active_pregnancy,
    last_calving_instant,
    last_service_instant,
)
from src.domain.value_objects.production_status import ProductionStatus
from src.utils.datetime_tz import whole_days_between, whole_months_between

# Months above the minimum age during which a "recently reached age" warning is shown
RECENT_AGE_MARGIN_MONTHS = 3


def evaluate_eligibility(
    animal: Animal,
    settings: BreedingSettings,
    timeline: BreedingTimeline,
    now: datetime,
) -> Eligibility:
    """Decide whether the animal can be bred at `now`.

    Every blocking rule is evaluated, so `reasons` lists all that apply.
    """
    status = ProductionStatus.parse(animal.production_status)
    result = Eligibility(
        eligible=True,
        age_in_months=0,
        production_status=status.value if status else animal.production_status,
    )

    # 1. Age
    if animal.birth_date is not None:
        result.age_in_months = whole_months_between(animal.birth_date, now)
        minimum = settings.minimum_breeding_age_months
        if result.age_in_months < minimum:
            result.reasons.append(
                f"Animal is too young ({result.age_in_months} months). "
                f"Minimum breeding age is {minimum} months."
            )
        elif result.age_in_months < minimum + RECENT_AGE_MARGIN_MONTHS:
            result.warnings.append("Recently reached breeding age - monitor heat cycles carefully.")
    else:
        result.warnings.append("Date of birth not recorded. Cannot verify age requirement.")

    # 2. Production status
    if status is None or not status.is_breedable():
        result.reasons.append(
            f'Production status "{animal.production_status or "Unknown"}" is not eligible for '
            "breeding. Animal must be: Heifer, Dry, Lactating, Served, or Pregnant."
        )

    # 3. Active pregnancy
    pregnant = find_active_pregnancy(timeline) is not None
    if pregnant:
        result.reasons.append("Animal is already pregnant.")

    # 4. Postpartum delay
    delay = settings.postpartum_breeding_delay_days
    calved_at = last_calving_instant(timeline)
    if calved_at is not None:
        days = whole_days_between(calved_at, now)
        result.days_since_calving = days
        if days < delay:
            result.reasons.append(
                f"Too soon after calving ({days} days). Must wait {delay} days postpartum."
            )
            result.next_breeding_date = (calved_at + timedelta(days=delay)).date()

    last_service = last_service_instant(timeline)
    if last_service is not None:
        days_since_service = whole_days_between(last_service, now)
        if 0 <= days_since_service < settings.heat_cycle_days:
            result.warnings.append(
                f"Recently bred {days_since_service} days ago - typical cycle is "
                f"{settings.heat_cycle_days} days."
            )

    result.eligible = not result.reasons
    if not result.eligible:
        return result

    # 5. Readiness flags
    if status is ProductionStatus.HEIFER and not timeline.has_any_service:
        result.is_ready_for_first_service = True
    latest_record = timeline.latest_breeding_record
    pending = latest_record is not None and latest_record.status is PregnancyStatus.PENDING
    if (
        status is not None
        and status.is_in_milk_cycle()
        and not pregnant
        and not pending
        and (result.days_since_calving is None or result.days_since_calving >= delay)
    ):
        result.is_ready_for_re_service = True

    if status is ProductionStatus.LACTATING:
        result.warnings.append("Animal is lactating. Monitor milk production after breeding.")
    return result
