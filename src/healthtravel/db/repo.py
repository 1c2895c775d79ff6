"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping domain logic pure.
Returns domain models (not SQLAlchemy entities) to external callers.

Write helpers only flush; committing is owned by the caller's
transaction scope.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Mapping

from sqlalchemy.orm import Session, selectinload

from healthtravel.db.schema import (
    AmbulanceService,
    City,
    CommonIllness,
    EmergencyInfo,
    GeneralRating,
    HealthRating,
    Hospital,
    InsuranceInfo,
    Vaccine,
)
from healthtravel.models.domain import (
    HEALTH_RATING_FIELDS,
    AmbulanceServiceEntity,
    CityBundle,
    CityEntity,
    EmergencyInfoEntity,
    GeneralRatingEntity,
    HealthRatingEntity,
    HospitalEntity,
    IllnessEntity,
    InsuranceInfoEntity,
    VaccineEntity,
)

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]


# ============================================================================
# Converters: SQLAlchemy -> Domain
# ============================================================================


def _city_to_entity(city: City) -> CityEntity:
    """Convert SQLAlchemy City to domain entity."""
    return CityEntity(
        id=city.id,
        city_name=city.city_name,
        country=city.country,
        overview=city.overview,
        description=city.description,
        city_image_url=city.city_image_url,
    )


def _general_rating_to_entity(rating: GeneralRating) -> GeneralRatingEntity:
    """Convert SQLAlchemy GeneralRating to domain entity."""
    return GeneralRatingEntity(id=rating.id, city_id=rating.city_id, rating=rating.rating)


def _health_rating_to_entity(rating: HealthRating) -> HealthRatingEntity:
    """Convert SQLAlchemy HealthRating to domain entity."""
    return HealthRatingEntity(
        id=rating.id,
        city_id=rating.city_id,
        language_support=rating.language_support,
        water_safety=rating.water_safety,
        food_safety=rating.food_safety,
        health_risk=rating.health_risk,
        air_quality=rating.air_quality,
    )


def _hospital_to_entity(hospital: Hospital) -> HospitalEntity:
    """Convert SQLAlchemy Hospital to domain entity."""
    return HospitalEntity(
        id=hospital.id,
        city_id=hospital.city_id,
        name=hospital.name,
        address=hospital.address,
        contact=hospital.contact,
        open_24_hours=hospital.open_24_hours,
    )


def _illness_to_entity(illness: CommonIllness) -> IllnessEntity:
    """Convert SQLAlchemy CommonIllness to domain entity."""
    return IllnessEntity(id=illness.id, city_id=illness.city_id, illness=illness.illness)


def _vaccine_to_entity(vaccine: Vaccine) -> VaccineEntity:
    """Convert SQLAlchemy Vaccine to domain entity."""
    return VaccineEntity(
        id=vaccine.id,
        city_id=vaccine.city_id,
        vaccine=vaccine.vaccine,
        importance=vaccine.importance,
    )


def _ambulance_to_entity(service: AmbulanceService) -> AmbulanceServiceEntity:
    """Convert SQLAlchemy AmbulanceService to domain entity."""
    return AmbulanceServiceEntity(
        id=service.id,
        emergency_info_id=service.emergency_info_id,
        available=service.available,
        lowest_fees=service.lowest_fees,
        highest_fees=service.highest_fees,
        response_time=service.response_time,
    )


def _emergency_to_entity(info: EmergencyInfo) -> EmergencyInfoEntity:
    """Convert SQLAlchemy EmergencyInfo (with ambulance) to domain entity."""
    return EmergencyInfoEntity(
        id=info.id,
        city_id=info.city_id,
        emergency_phone=info.emergency_phone,
        ambulance_service=(
            _ambulance_to_entity(info.ambulance_service) if info.ambulance_service else None
        ),
    )


def _insurance_to_entity(info: InsuranceInfo) -> InsuranceInfoEntity:
    """Convert SQLAlchemy InsuranceInfo to domain entity."""
    return InsuranceInfoEntity(
        id=info.id,
        city_id=info.city_id,
        international_accepted=info.international_accepted,
        travel_insurance_recommended=info.travel_insurance_recommended,
    )


def _city_to_bundle(city: City) -> CityBundle:
    """Convert a City with loaded relationships to a bundle."""
    return CityBundle(
        city=_city_to_entity(city),
        general_ratings=[_general_rating_to_entity(r) for r in city.general_ratings],
        health_ratings=[_health_rating_to_entity(r) for r in city.health_ratings],
        hospitals=[_hospital_to_entity(h) for h in city.hospitals],
        common_illnesses=[_illness_to_entity(i) for i in city.common_illnesses],
        vaccines=[_vaccine_to_entity(v) for v in city.vaccines],
        emergency_info=_emergency_to_entity(city.emergency_info) if city.emergency_info else None,
        insurance_info=_insurance_to_entity(city.insurance_info) if city.insurance_info else None,
    )


_BUNDLE_OPTIONS = (
    selectinload(City.general_ratings),
    selectinload(City.health_ratings),
    selectinload(City.hospitals),
    selectinload(City.common_illnesses),
    selectinload(City.vaccines),
    selectinload(City.emergency_info).selectinload(EmergencyInfo.ambulance_service),
    selectinload(City.insurance_info),
)


# ============================================================================
# City Repository
# ============================================================================


def get_city(session: DbSession, city_id: str) -> CityEntity | None:
    """Get city by ID."""
    city = session.query(City).filter(City.id == city_id).first()
    return _city_to_entity(city) if city else None


def city_exists(session: DbSession, city_id: str) -> bool:
    """Check whether a city row exists."""
    return session.query(City.id).filter(City.id == city_id).first() is not None


def get_city_bundle(session: DbSession, city_id: str) -> CityBundle | None:
    """Get a city with every child row."""
    city = session.query(City).options(*_BUNDLE_OPTIONS).filter(City.id == city_id).first()
    return _city_to_bundle(city) if city else None


def list_city_bundles(session: DbSession) -> list[CityBundle]:
    """Get every city with every child row."""
    cities = session.query(City).options(*_BUNDLE_OPTIONS).order_by(City.city_name).all()
    return [_city_to_bundle(c) for c in cities]


def list_cities_with_general_ratings(session: DbSession) -> list[CityBundle]:
    """Get every city with only its general ratings loaded."""
    cities = (
        session.query(City)
        .options(selectinload(City.general_ratings))
        .order_by(City.city_name)
        .all()
    )
    return [
        CityBundle(
            city=_city_to_entity(c),
            general_ratings=[_general_rating_to_entity(r) for r in c.general_ratings],
        )
        for c in cities
    ]


def create_city(
    session: DbSession, *, city_name: str, country: str, overview: str
) -> CityEntity:
    """Create a new city."""
    city = City(city_name=city_name, country=country, overview=overview)
    session.add(city)
    session.flush()
    return _city_to_entity(city)


def update_city(session: DbSession, city_id: str, **fields: Any) -> CityEntity | None:
    """Set columns on a city. Values of None are written as NULL."""
    city = session.query(City).filter(City.id == city_id).first()
    if city is None:
        return None
    for name, value in fields.items():
        setattr(city, name, value)
    session.flush()
    return _city_to_entity(city)


# ============================================================================
# Rating Repository
# ============================================================================


def get_general_ratings_for_city(session: DbSession, city_id: str) -> list[GeneralRatingEntity]:
    """Get all general ratings for a city."""
    ratings = session.query(GeneralRating).filter(GeneralRating.city_id == city_id).all()
    return [_general_rating_to_entity(r) for r in ratings]


def create_general_rating(session: DbSession, city_id: str, rating: float) -> GeneralRatingEntity:
    """Create a new general rating."""
    row = GeneralRating(city_id=city_id, rating=rating)
    session.add(row)
    session.flush()
    return _general_rating_to_entity(row)


def update_general_rating(
    session: DbSession, rating_id: str, rating: float
) -> GeneralRatingEntity | None:
    """Update the value of a general rating."""
    row = session.query(GeneralRating).filter(GeneralRating.id == rating_id).first()
    if row is None:
        return None
    row.rating = rating
    session.flush()
    return _general_rating_to_entity(row)


def delete_general_rating(session: DbSession, rating_id: str) -> GeneralRatingEntity | None:
    """Delete a general rating, returning the deleted row."""
    row = session.query(GeneralRating).filter(GeneralRating.id == rating_id).first()
    if row is None:
        return None
    entity = _general_rating_to_entity(row)
    session.delete(row)
    session.flush()
    return entity


def get_health_ratings_for_city(session: DbSession, city_id: str) -> list[HealthRatingEntity]:
    """Get all health ratings for a city."""
    ratings = session.query(HealthRating).filter(HealthRating.city_id == city_id).all()
    return [_health_rating_to_entity(r) for r in ratings]


def create_health_rating(
    session: DbSession, city_id: str, values: Mapping[str, float]
) -> HealthRatingEntity:
    """Create a new health rating."""
    row = HealthRating(city_id=city_id, **{f: values[f] for f in HEALTH_RATING_FIELDS})
    session.add(row)
    session.flush()
    return _health_rating_to_entity(row)


def update_health_rating(
    session: DbSession, rating_id: str, values: Mapping[str, float]
) -> HealthRatingEntity | None:
    """Update every axis of a health rating."""
    row = session.query(HealthRating).filter(HealthRating.id == rating_id).first()
    if row is None:
        return None
    for name in HEALTH_RATING_FIELDS:
        setattr(row, name, values[name])
    session.flush()
    return _health_rating_to_entity(row)


def delete_health_rating(session: DbSession, rating_id: str) -> HealthRatingEntity | None:
    """Delete a health rating, returning the deleted row."""
    row = session.query(HealthRating).filter(HealthRating.id == rating_id).first()
    if row is None:
        return None
    entity = _health_rating_to_entity(row)
    session.delete(row)
    session.flush()
    return entity


# ============================================================================
# Hospital Repository
# ============================================================================


def get_hospital(session: DbSession, hospital_id: str) -> HospitalEntity | None:
    """Get hospital by ID."""
    row = session.query(Hospital).filter(Hospital.id == hospital_id).first()
    return _hospital_to_entity(row) if row else None


def get_hospitals_for_city(session: DbSession, city_id: str) -> list[HospitalEntity]:
    """Get all hospitals for a city."""
    rows = session.query(Hospital).filter(Hospital.city_id == city_id).all()
    return [_hospital_to_entity(r) for r in rows]


def add_hospitals(
    session: DbSession, city_id: str, hospitals: Iterable[Mapping[str, Any]]
) -> list[HospitalEntity]:
    """Insert hospitals for a city."""
    rows = [
        Hospital(
            city_id=city_id,
            name=h["name"],
            address=h["address"],
            contact=h["contact"],
            open_24_hours=h["open_24_hours"],
        )
        for h in hospitals
    ]
    session.add_all(rows)
    session.flush()
    return [_hospital_to_entity(r) for r in rows]


def delete_hospitals_for_city(session: DbSession, city_id: str) -> int:
    """Delete every hospital of a city. Returns the number of rows removed."""
    return (
        session.query(Hospital)
        .filter(Hospital.city_id == city_id)
        .delete(synchronize_session="fetch")
    )


def delete_hospitals_by_ids(session: DbSession, hospital_ids: list[str]) -> int:
    """Delete hospitals by ID. Returns the number of rows removed."""
    return (
        session.query(Hospital)
        .filter(Hospital.id.in_(hospital_ids))
        .delete(synchronize_session="fetch")
    )


# ============================================================================
# Vaccine Repository
# ============================================================================


def get_vaccine(session: DbSession, vaccine_id: str) -> VaccineEntity | None:
    """Get vaccine by ID."""
    row = session.query(Vaccine).filter(Vaccine.id == vaccine_id).first()
    return _vaccine_to_entity(row) if row else None


def get_vaccines_for_city(session: DbSession, city_id: str) -> list[VaccineEntity]:
    """Get all vaccines for a city."""
    rows = session.query(Vaccine).filter(Vaccine.city_id == city_id).all()
    return [_vaccine_to_entity(r) for r in rows]


def add_vaccines(
    session: DbSession, city_id: str, vaccines: Iterable[Mapping[str, Any]]
) -> list[VaccineEntity]:
    """Insert vaccines for a city."""
    rows = [
        Vaccine(city_id=city_id, vaccine=v["vaccine"], importance=v["importance"])
        for v in vaccines
    ]
    session.add_all(rows)
    session.flush()
    return [_vaccine_to_entity(r) for r in rows]


def delete_vaccines_for_city(session: DbSession, city_id: str) -> int:
    """Delete every vaccine of a city. Returns the number of rows removed."""
    return (
        session.query(Vaccine)
        .filter(Vaccine.city_id == city_id)
        .delete(synchronize_session="fetch")
    )


def delete_vaccines_by_ids(session: DbSession, vaccine_ids: list[str]) -> int:
    """Delete vaccines by ID. Returns the number of rows removed."""
    return (
        session.query(Vaccine)
        .filter(Vaccine.id.in_(vaccine_ids))
        .delete(synchronize_session="fetch")
    )


# ============================================================================
# Common Illness Repository
# ============================================================================


def get_illness(session: DbSession, illness_id: str) -> IllnessEntity | None:
    """Get common illness by ID."""
    row = session.query(CommonIllness).filter(CommonIllness.id == illness_id).first()
    return _illness_to_entity(row) if row else None


def get_illnesses_for_city(session: DbSession, city_id: str) -> list[IllnessEntity]:
    """Get all common illnesses for a city."""
    rows = session.query(CommonIllness).filter(CommonIllness.city_id == city_id).all()
    return [_illness_to_entity(r) for r in rows]


def add_illnesses(
    session: DbSession, city_id: str, illnesses: Iterable[Mapping[str, Any]]
) -> list[IllnessEntity]:
    """Insert common illnesses for a city."""
    rows = [CommonIllness(city_id=city_id, illness=i["illness"]) for i in illnesses]
    session.add_all(rows)
    session.flush()
    return [_illness_to_entity(r) for r in rows]


def delete_illnesses_for_city(session: DbSession, city_id: str) -> int:
    """Delete every common illness of a city. Returns the number of rows removed."""
    return (
        session.query(CommonIllness)
        .filter(CommonIllness.city_id == city_id)
        .delete(synchronize_session="fetch")
    )


def delete_illness(session: DbSession, illness_id: str) -> IllnessEntity | None:
    """Delete a common illness, returning the deleted row."""
    row = session.query(CommonIllness).filter(CommonIllness.id == illness_id).first()
    if row is None:
        return None
    entity = _illness_to_entity(row)
    session.delete(row)
    session.flush()
    return entity


# ============================================================================
# Emergency Repository
# ============================================================================


def get_emergency_info(session: DbSession, info_id: str) -> EmergencyInfoEntity | None:
    """Get emergency info (with ambulance service) by ID."""
    info = session.query(EmergencyInfo).filter(EmergencyInfo.id == info_id).first()
    return _emergency_to_entity(info) if info else None


def get_emergency_info_for_city(session: DbSession, city_id: str) -> EmergencyInfoEntity | None:
    """Get the emergency info of a city."""
    info = session.query(EmergencyInfo).filter(EmergencyInfo.city_id == city_id).first()
    return _emergency_to_entity(info) if info else None


def create_emergency_info(
    session: DbSession,
    city_id: str,
    emergency_phone: str,
    ambulance_service: Mapping[str, Any] | None = None,
) -> EmergencyInfoEntity:
    """Create emergency info and, if given, its ambulance service."""
    info = EmergencyInfo(city_id=city_id, emergency_phone=emergency_phone)
    session.add(info)
    session.flush()

    if ambulance_service is not None:
        info.ambulance_service = AmbulanceService(
            emergency_info_id=info.id, **dict(ambulance_service)
        )
        session.flush()

    return _emergency_to_entity(info)


def update_emergency_info(
    session: DbSession,
    info_id: str,
    *,
    emergency_phone: str | None = None,
    ambulance_service: Mapping[str, Any] | None = None,
) -> EmergencyInfoEntity | None:
    """Update emergency info; the ambulance service is created if missing."""
    info = session.query(EmergencyInfo).filter(EmergencyInfo.id == info_id).first()
    if info is None:
        return None

    if emergency_phone is not None:
        info.emergency_phone = emergency_phone

    if ambulance_service is not None:
        if info.ambulance_service is None:
            info.ambulance_service = AmbulanceService(
                emergency_info_id=info.id, **dict(ambulance_service)
            )
        else:
            for name, value in ambulance_service.items():
                setattr(info.ambulance_service, name, value)

    session.flush()
    return _emergency_to_entity(info)


def delete_ambulance_service_for_info(session: DbSession, info_id: str) -> int:
    """Delete the ambulance service of an emergency info row."""
    return (
        session.query(AmbulanceService)
        .filter(AmbulanceService.emergency_info_id == info_id)
        .delete(synchronize_session="fetch")
    )


def delete_emergency_info(session: DbSession, info_id: str) -> int:
    """Delete an emergency info row. Returns the number of rows removed."""
    return (
        session.query(EmergencyInfo)
        .filter(EmergencyInfo.id == info_id)
        .delete(synchronize_session="fetch")
    )


# ============================================================================
# Insurance Repository
# ============================================================================


def get_insurance_info_for_city(session: DbSession, city_id: str) -> InsuranceInfoEntity | None:
    """Get the insurance info of a city."""
    info = session.query(InsuranceInfo).filter(InsuranceInfo.city_id == city_id).first()
    return _insurance_to_entity(info) if info else None


def create_insurance_info(
    session: DbSession,
    city_id: str,
    *,
    international_accepted: bool,
    travel_insurance_recommended: bool,
) -> InsuranceInfoEntity:
    """Create insurance info for a city."""
    info = InsuranceInfo(
        city_id=city_id,
        international_accepted=international_accepted,
        travel_insurance_recommended=travel_insurance_recommended,
    )
    session.add(info)
    session.flush()
    return _insurance_to_entity(info)


def update_insurance_info(
    session: DbSession,
    info_id: str,
    *,
    international_accepted: bool,
    travel_insurance_recommended: bool,
) -> InsuranceInfoEntity | None:
    """Update both insurance flags."""
    info = session.query(InsuranceInfo).filter(InsuranceInfo.id == info_id).first()
    if info is None:
        return None
    info.international_accepted = international_accepted
    info.travel_insurance_recommended = travel_insurance_recommended
    session.flush()
    return _insurance_to_entity(info)


def delete_insurance_info(session: DbSession, info_id: str) -> int:
    """Delete an insurance info row. Returns the number of rows removed."""
    return (
        session.query(InsuranceInfo)
        .filter(InsuranceInfo.id == info_id)
        .delete(synchronize_session="fetch")
    )
