"""Pydantic models for the health-travel API.

Request bodies double as the validated input structs of the domain
operations. Field names are snake_case in Python and camelCase on the
wire.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Closed range shared by every rating field
RATING_MIN = 0
RATING_MAX = 5

# SQLite INTEGER is a signed 64-bit value
INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1

FEES_MAX = 1_000_000_000


class ApiModel(BaseModel):
    """Base model mapping snake_case attributes to camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ============================================================================
# Inputs
# ============================================================================


class CityCreate(ApiModel):
    """New city overview with its first general rating."""

    city_name: str = Field(min_length=1)
    country: str = Field(min_length=1)
    overview: str = Field(min_length=1)
    general_rating: float = Field(ge=RATING_MIN, le=RATING_MAX)


class CityImageUpdate(ApiModel):
    """Already-resolved image URL for a city."""

    city_image_url: str = Field(min_length=1)


class DescriptionInput(ApiModel):
    """City description text."""

    description: str = Field(min_length=1)


class GeneralRatingInput(ApiModel):
    """Single general rating."""

    rating: float = Field(ge=RATING_MIN, le=RATING_MAX)


class HealthRatingInput(ApiModel):
    """Five-axis health rating."""

    language_support: float = Field(ge=RATING_MIN, le=RATING_MAX)
    water_safety: float = Field(ge=RATING_MIN, le=RATING_MAX)
    food_safety: float = Field(ge=RATING_MIN, le=RATING_MAX)
    health_risk: float = Field(ge=RATING_MIN, le=RATING_MAX)
    air_quality: float = Field(ge=RATING_MIN, le=RATING_MAX)


class HospitalInput(ApiModel):
    """Hospital fields. open24Hours must be present; false is valid."""

    name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    contact: str = Field(min_length=1)
    open_24_hours: bool = Field(alias="open24Hours")


class VaccineInput(ApiModel):
    """Vaccine fields."""

    vaccine: str = Field(min_length=1)
    importance: int = Field(ge=INTEGER_MIN, le=INTEGER_MAX)


class IllnessInput(ApiModel):
    """Common illness fields."""

    illness: str = Field(min_length=1)


class HospitalList(ApiModel):
    """Replacement or batch set of hospitals."""

    hospitals: list[HospitalInput]


class VaccineList(ApiModel):
    """Replacement or batch set of vaccines."""

    vaccines: list[VaccineInput]


class IllnessList(ApiModel):
    """Replacement or batch set of common illnesses."""

    illnesses: list[IllnessInput]


class IdList(ApiModel):
    """Identifiers for a bulk delete."""

    ids: list[str]


class AmbulanceServiceInput(ApiModel):
    """Ambulance service fields."""

    available: bool
    lowest_fees: float | None = Field(default=None, ge=0, le=FEES_MAX, allow_inf_nan=False)
    highest_fees: float | None = Field(default=None, ge=0, le=FEES_MAX, allow_inf_nan=False)
    response_time: str | None = None


class EmergencyInfoCreate(ApiModel):
    """Emergency info with an optional ambulance service."""

    emergency_phone: str = Field(min_length=1)
    ambulance_service: AmbulanceServiceInput | None = None


class EmergencyInfoUpdate(ApiModel):
    """Partial emergency info update. Omitted fields are left unchanged."""

    emergency_phone: str | None = Field(default=None, min_length=1)
    ambulance_service: AmbulanceServiceInput | None = None


class InsuranceInput(ApiModel):
    """Insurance acceptance flags."""

    international_accepted: bool
    travel_insurance_recommended: bool


# ============================================================================
# Outputs
# ============================================================================


class CityOut(ApiModel):
    """City row."""

    id: str
    city_name: str
    country: str
    overview: str
    description: str | None
    city_image_url: str | None


class DescriptionOut(ApiModel):
    """City description."""

    id: str
    description: str | None


class GeneralRatingOut(ApiModel):
    """General rating row."""

    id: str
    city_id: str
    rating: float


class HealthRatingOut(ApiModel):
    """Health rating row."""

    id: str
    city_id: str
    language_support: float
    water_safety: float
    food_safety: float
    health_risk: float
    air_quality: float


class HospitalOut(ApiModel):
    """Hospital row."""

    id: str
    city_id: str
    name: str
    address: str
    contact: str
    open_24_hours: bool = Field(alias="open24Hours")


class IllnessOut(ApiModel):
    """Common illness row."""

    id: str
    city_id: str
    illness: str


class VaccineOut(ApiModel):
    """Vaccine row."""

    id: str
    city_id: str
    vaccine: str
    importance: int


class AmbulanceServiceOut(ApiModel):
    """Ambulance service row."""

    id: str
    emergency_info_id: str
    available: bool
    lowest_fees: float | None
    highest_fees: float | None
    response_time: str | None


class EmergencyInfoOut(ApiModel):
    """Emergency info row with its ambulance service."""

    id: str
    city_id: str
    emergency_phone: str
    ambulance_service: AmbulanceServiceOut | None


class InsuranceInfoOut(ApiModel):
    """Insurance info row."""

    id: str
    city_id: str
    international_accepted: bool
    travel_insurance_recommended: bool


class HealthRatingAverages(ApiModel):
    """Per-axis mean of a city's health ratings, rounded to 2 places."""

    language_support: float = 0.0
    water_safety: float = 0.0
    food_safety: float = 0.0
    health_risk: float = 0.0
    air_quality: float = 0.0


class GeneralRatingSummary(ApiModel):
    """General ratings of a city with their mean."""

    ratings: list[GeneralRatingOut]
    average_rating: float


class CityOverview(ApiModel):
    """Listing card for a city."""

    id: str
    city_name: str
    country: str
    overview: str
    city_image_url: str | None
    average_general_rating: float


class CityDetail(CityOut):
    """City with every child row and derived rating averages."""

    general_ratings: list[GeneralRatingOut]
    health_ratings: list[HealthRatingOut]
    hospitals: list[HospitalOut]
    common_illnesses: list[IllnessOut]
    vaccines: list[VaccineOut]
    emergency_info: EmergencyInfoOut | None
    insurance_info: InsuranceInfoOut | None
    average_general_rating: float
    average_health_ratings: HealthRatingAverages


class CityCreated(CityOut):
    """Newly created city with its initial general rating."""

    general_ratings: list[GeneralRatingOut]


class BatchResult(ApiModel):
    """Outcome of a create-many, replace-all or bulk delete."""

    success: bool = True
    message: str
    count: int


class DeleteResult(ApiModel):
    """Outcome of a single-row delete."""

    success: bool = True
    message: str
