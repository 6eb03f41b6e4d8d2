from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.models.window_status import CalvingOutlook, WindowAction, WindowState


class BreedingSettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    minimum_breeding_age_months: int
    default_gestation_period_days: int
    pregnancy_check_wait_days: int
    postpartum_breeding_delay_days: int
    heat_cycle_days: int
    auto_schedule_pregnancy_check: bool


class EligibilityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    eligible: bool
    reasons: list[str]
    warnings: list[str]
    age_in_months: int
    production_status: str | None = None
    days_since_calving: int | None = None
    next_breeding_date: date | None = None
    is_ready_for_first_service: bool
    is_ready_for_re_service: bool


class WindowStatusResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

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


class EventPointer(BaseModel):
    kind: str
    id: UUID | None = None
    occurred_at: datetime
    created_at: datetime | None = None


class LatestEventsResponse(BaseModel):
    heat: EventPointer | None = None
    insemination: EventPointer | None = None
    pregnancy_check: EventPointer | None = None
    calving: EventPointer | None = None
    breeding_record: EventPointer | None = None


class BreedingOverviewResponse(BaseModel):
    animal_id: UUID
    tag: str
    name: str | None = None
    evaluated_at: datetime
    settings: BreedingSettingsResponse
    eligibility: EligibilityResponse
    window: WindowStatusResponse | None = None
    latest_events: LatestEventsResponse


class ActionItemResponse(BaseModel):
    animal_id: UUID
    tag: str
    name: str | None = None
    window: WindowStatusResponse


class ActionItemListResponse(BaseModel):
    evaluated_at: datetime
    items: list[ActionItemResponse]


class PregnantAnimalResponse(BaseModel):
    animal_id: UUID
    tag: str
    name: str | None = None
    conception_date: date | None = None
    due_date: date | None = None
    days_pregnant: int | None = None
    days_until_due: int | None = None
    outlook: CalvingOutlook


class PregnantAnimalListResponse(BaseModel):
    evaluated_at: datetime
    items: list[PregnantAnimalResponse]


class BreedingTrendsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    heat_detection: int
    insemination: int
    pregnancy: int


class BreedingStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    evaluated_at: datetime
    current_pregnant: int
    expected_calvings_this_month: int
    conception_rate: int
    recent_heat_detections: int
    total_inseminations: int
    total_pregnancy_checks: int
    total_calvings: int
    trends: BreedingTrendsResponse
