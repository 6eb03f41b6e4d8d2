from __future__ import annotations

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends

from src.application.use_cases.breeding import (
    evaluate_eligibility,
    get_breeding_overview,
    get_breeding_stats,
    get_window_status,
    list_action_items,
    list_pregnant_animals,
)
from src.domain.services.breeding_timeline import BreedingEvent
from src.interfaces.http.deps import get_evaluation_time, get_tenant_id, get_uow
from src.interfaces.http.schemas.breeding import (
    ActionItemListResponse,
    ActionItemResponse,
    BreedingOverviewResponse,
    BreedingSettingsResponse,
    BreedingStatsResponse,
    BreedingTrendsResponse,
    EligibilityResponse,
    EventPointer,
    LatestEventsResponse,
    PregnantAnimalListResponse,
    PregnantAnimalResponse,
    WindowStatusResponse,
)
from src.utils.datetime_tz import to_utc

router = APIRouter(tags=["breeding"])


def _pointer(event: BreedingEvent | None) -> EventPointer | None:
    if event is None:
        return None
    return EventPointer(
        kind=event.kind,
        id=event.id,
        occurred_at=to_utc(event.timestamp()),
        created_at=to_utc(event.created_at) if event.created_at else None,
    )


@router.get("/animals/{animal_id}/breeding/eligibility", response_model=EligibilityResponse)
async def get_eligibility_endpoint(
    animal_id: UUID,
    now: datetime = Depends(get_evaluation_time),
    tenant_id: UUID = Depends(get_tenant_id),
    uow=Depends(get_uow),
):
    result = await evaluate_eligibility.execute(uow, tenant_id, animal_id, now)
    return EligibilityResponse.model_validate(result)


@router.get(
    "/animals/{animal_id}/breeding/window",
    response_model=WindowStatusResponse | None,
)
async def get_window_endpoint(
    animal_id: UUID,
    now: datetime = Depends(get_evaluation_time),
    tenant_id: UUID = Depends(get_tenant_id),
    uow=Depends(get_uow),
):
    window = await get_window_status.execute(uow, tenant_id, animal_id, now)
    if window is None:
        return None
    return WindowStatusResponse.model_validate(window)


@router.get("/animals/{animal_id}/breeding/overview", response_model=BreedingOverviewResponse)
async def get_overview_endpoint(
    animal_id: UUID,
    now: datetime = Depends(get_evaluation_time),
    tenant_id: UUID = Depends(get_tenant_id),
    uow=Depends(get_uow),
):
    overview = await get_breeding_overview.execute(uow, tenant_id, animal_id, now)
    timeline = overview.timeline
    return BreedingOverviewResponse(
        animal_id=overview.animal.id,
        tag=overview.animal.tag,
        name=overview.animal.name,
        evaluated_at=now,
        settings=BreedingSettingsResponse.model_validate(overview.settings),
        eligibility=EligibilityResponse.model_validate(overview.eligibility),
        window=WindowStatusResponse.model_validate(overview.window) if overview.window else None,
        latest_events=LatestEventsResponse(
            heat=_pointer(timeline.latest_heat),
            insemination=_pointer(timeline.latest_insemination),
            pregnancy_check=_pointer(timeline.latest_pregnancy_check),
            calving=_pointer(timeline.latest_calving),
            breeding_record=_pointer(timeline.latest_breeding_record),
        ),
    )


@router.get("/breeding/action-items", response_model=ActionItemListResponse)
async def list_action_items_endpoint(
    now: datetime = Depends(get_evaluation_time),
    tenant_id: UUID = Depends(get_tenant_id),
    uow=Depends(get_uow),
):
    items = await list_action_items.execute(uow, tenant_id, now)
    return ActionItemListResponse(
        evaluated_at=now,
        items=[
            ActionItemResponse(
                animal_id=item.animal.id,
                tag=item.animal.tag,
                name=item.animal.name,
                window=WindowStatusResponse.model_validate(item.window),
            )
            for item in items
        ],
    )


@router.get("/breeding/pregnant", response_model=PregnantAnimalListResponse)
async def list_pregnant_animals_endpoint(
    now: datetime = Depends(get_evaluation_time),
    tenant_id: UUID = Depends(get_tenant_id),
    uow=Depends(get_uow),
):
    items = await list_pregnant_animals.execute(uow, tenant_id, now)
    return PregnantAnimalListResponse(
        evaluated_at=now,
        items=[
            PregnantAnimalResponse(
                animal_id=item.animal.id,
                tag=item.animal.tag,
                name=item.animal.name,
                conception_date=item.conception_date,
                due_date=item.due_date,
                days_pregnant=item.days_pregnant,
                days_until_due=item.days_until_due,
                outlook=item.outlook,
            )
            for item in items
        ],
    )


@router.get("/breeding/stats", response_model=BreedingStatsResponse)
async def get_breeding_stats_endpoint(
    now: datetime = Depends(get_evaluation_time),
    tenant_id: UUID = Depends(get_tenant_id),
    uow=Depends(get_uow),
):
    stats = await get_breeding_stats.execute(uow, tenant_id, now)
    return BreedingStatsResponse(
        evaluated_at=now,
        current_pregnant=stats.current_pregnant,
        expected_calvings_this_month=stats.expected_calvings_this_month,
        conception_rate=stats.conception_rate,
        recent_heat_detections=stats.recent_heat_detections,
        total_inseminations=stats.total_inseminations,
        total_pregnancy_checks=stats.total_pregnancy_checks,
        total_calvings=stats.total_calvings,
        trends=BreedingTrendsResponse.model_validate(stats.trends),
    )
