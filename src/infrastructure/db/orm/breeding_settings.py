from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Integer, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class BreedingSettingsORM(Base):
    __tablename__ = "farm_breeding_settings"

    tenant_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    minimum_breeding_age_months: Mapped[int | None] = mapped_column(Integer, nullable=True)
    default_gestation_period_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    pregnancy_check_wait_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    postpartum_breeding_delay_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    heat_cycle_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    auto_schedule_pregnancy_check: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
