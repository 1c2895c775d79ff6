"""Domain models for the health-travel service.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy and used throughout
the application for clean separation from the database layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ============================================================================
# City Domain
# ============================================================================


@dataclass
class CityEntity:
    """Domain model for a city."""

    id: str
    city_name: str
    country: str
    overview: str
    description: str | None = None
    city_image_url: str | None = None


# ============================================================================
# Rating Domain
# ============================================================================

# Numeric axes of a health rating, each in [0, 5]
HEALTH_RATING_FIELDS = (
    "language_support",
    "water_safety",
    "food_safety",
    "health_risk",
    "air_quality",
)


@dataclass
class GeneralRatingEntity:
    """Domain model for a general rating."""

    id: str
    city_id: str
    rating: float


@dataclass
class HealthRatingEntity:
    """Domain model for a five-axis health rating."""

    id: str
    city_id: str
    language_support: float
    water_safety: float
    food_safety: float
    health_risk: float
    air_quality: float


# ============================================================================
# Facilities Domain
# ============================================================================


@dataclass
class HospitalEntity:
    """Domain model for a hospital."""

    id: str
    city_id: str
    name: str
    address: str
    contact: str
    open_24_hours: bool


@dataclass
class IllnessEntity:
    """Domain model for a common illness."""

    id: str
    city_id: str
    illness: str


@dataclass
class VaccineEntity:
    """Domain model for a recommended vaccine."""

    id: str
    city_id: str
    vaccine: str
    importance: int


# ============================================================================
# Emergency / Insurance Domain
# ============================================================================


@dataclass
class AmbulanceServiceEntity:
    """Domain model for an ambulance service."""

    id: str
    emergency_info_id: str
    available: bool
    lowest_fees: float | None = None
    highest_fees: float | None = None
    response_time: str | None = None


@dataclass
class EmergencyInfoEntity:
    """Domain model for emergency info with its ambulance service."""

    id: str
    city_id: str
    emergency_phone: str
    ambulance_service: AmbulanceServiceEntity | None = None


@dataclass
class InsuranceInfoEntity:
    """Domain model for insurance info."""

    id: str
    city_id: str
    international_accepted: bool
    travel_insurance_recommended: bool


# ============================================================================
# Aggregate
# ============================================================================


@dataclass
class CityBundle:
    """A city together with every child row it owns."""

    city: CityEntity
    general_ratings: list[GeneralRatingEntity] = field(default_factory=list)
    health_ratings: list[HealthRatingEntity] = field(default_factory=list)
    hospitals: list[HospitalEntity] = field(default_factory=list)
    common_illnesses: list[IllnessEntity] = field(default_factory=list)
    vaccines: list[VaccineEntity] = field(default_factory=list)
    emergency_info: EmergencyInfoEntity | None = None
    insurance_info: InsuranceInfoEntity | None = None
