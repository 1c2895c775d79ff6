"""Database schema for the health-travel service.

Every table hangs off City. One-to-one children carry a unique
constraint on their foreign key.
"""

import uuid
from typing import Optional

from sqlalchemy import (
    Boolean,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _new_id() -> str:
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class City(Base):
    """Parent aggregate for all health-travel facts."""

    __tablename__ = "cities"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    city_name: Mapped[str] = mapped_column(String(128), nullable=False)
    country: Mapped[str] = mapped_column(String(128), nullable=False)
    overview: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    city_image_url: Mapped[str | None] = mapped_column(String(512), nullable=True)

    general_ratings: Mapped[list["GeneralRating"]] = relationship()
    health_ratings: Mapped[list["HealthRating"]] = relationship()
    hospitals: Mapped[list["Hospital"]] = relationship()
    common_illnesses: Mapped[list["CommonIllness"]] = relationship()
    vaccines: Mapped[list["Vaccine"]] = relationship()
    emergency_info: Mapped[Optional["EmergencyInfo"]] = relationship(uselist=False)
    insurance_info: Mapped[Optional["InsuranceInfo"]] = relationship(uselist=False)


class GeneralRating(Base):
    """Single overall rating (0-5) for a city."""

    __tablename__ = "general_ratings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    city_id: Mapped[str] = mapped_column(String(36), ForeignKey("cities.id"), nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)


class HealthRating(Base):
    """Five-axis health rating (each 0-5) for a city."""

    __tablename__ = "health_ratings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    city_id: Mapped[str] = mapped_column(String(36), ForeignKey("cities.id"), nullable=False)
    language_support: Mapped[float] = mapped_column(Float, nullable=False)
    water_safety: Mapped[float] = mapped_column(Float, nullable=False)
    food_safety: Mapped[float] = mapped_column(Float, nullable=False)
    health_risk: Mapped[float] = mapped_column(Float, nullable=False)
    air_quality: Mapped[float] = mapped_column(Float, nullable=False)


class Hospital(Base):
    """Hospital in a city."""

    __tablename__ = "hospitals"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    city_id: Mapped[str] = mapped_column(String(36), ForeignKey("cities.id"), nullable=False)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    address: Mapped[str] = mapped_column(String(512), nullable=False)
    contact: Mapped[str] = mapped_column(String(128), nullable=False)
    open_24_hours: Mapped[bool] = mapped_column(Boolean, nullable=False)


class CommonIllness(Base):
    """Illness commonly contracted by travellers to a city."""

    __tablename__ = "common_illnesses"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    city_id: Mapped[str] = mapped_column(String(36), ForeignKey("cities.id"), nullable=False)
    illness: Mapped[str] = mapped_column(String(256), nullable=False)


class Vaccine(Base):
    """Vaccine recommended before travelling to a city."""

    __tablename__ = "vaccines"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    city_id: Mapped[str] = mapped_column(String(36), ForeignKey("cities.id"), nullable=False)
    vaccine: Mapped[str] = mapped_column(String(256), nullable=False)
    importance: Mapped[int] = mapped_column(Integer, nullable=False)


class EmergencyInfo(Base):
    """Emergency contact details.

    Invariant: one per city.
    """

    __tablename__ = "emergency_info"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    city_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("cities.id"), nullable=False, unique=True
    )
    emergency_phone: Mapped[str] = mapped_column(String(64), nullable=False)

    ambulance_service: Mapped[Optional["AmbulanceService"]] = relationship(uselist=False)


class AmbulanceService(Base):
    """Ambulance availability and pricing.

    Invariant: one per emergency info row.
    """

    __tablename__ = "ambulance_services"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    emergency_info_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("emergency_info.id"), nullable=False, unique=True
    )
    available: Mapped[bool] = mapped_column(Boolean, nullable=False)
    lowest_fees: Mapped[float | None] = mapped_column(Float, nullable=True)
    highest_fees: Mapped[float | None] = mapped_column(Float, nullable=True)
    response_time: Mapped[str | None] = mapped_column(String(64), nullable=True)


class InsuranceInfo(Base):
    """Insurance acceptance for a city.

    Invariant: one per city.
    """

    __tablename__ = "insurance_info"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    city_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("cities.id"), nullable=False, unique=True
    )
    international_accepted: Mapped[bool] = mapped_column(Boolean, nullable=False)
    travel_insurance_recommended: Mapped[bool] = mapped_column(Boolean, nullable=False)
