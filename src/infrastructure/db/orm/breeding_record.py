from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class BreedingRecordORM(Base):
    __tablename__ = "breeding_records"
    __table_args__ = (
        Index(
            "ix_breeding_records_tenant_animal_date",
            "tenant_id",
            "animal_id",
            "breeding_date",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    tenant_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
    animal_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("animals.id"),
        nullable=False,
    )
    breeding_date: Mapped[date] = mapped_column(Date, nullable=False)
    breeding_method: Mapped[str] = mapped_column(String(32), nullable=False)
    pregnancy_status: Mapped[str] = mapped_column(
        String(16), server_default="pending", nullable=False
    )
    expected_calving_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    actual_calving_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
