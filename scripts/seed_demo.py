#!/usr/bin/env python3
"""Seed a demo city with ratings, facilities and emergency details.

Creates a complete demo city that can be used to try the API and the
client app end to end.

Usage:
    python scripts/seed_demo.py

This script:
1. Initializes the demo database
2. Creates the demo city with its first general rating
3. Adds a description, extra ratings and health ratings
4. Adds hospitals, vaccines and common illnesses
5. Adds emergency info (with ambulance service) and insurance info
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from healthtravel.aggregation.city_views import get_city_detail  # noqa: E402
from healthtravel.db.schema import City  # noqa: E402
from healthtravel.db.session import get_session, init_db  # noqa: E402
from healthtravel.editing import (  # noqa: E402
    cities,
    emergency,
    facilities,
    insurance,
    ratings,
)

# Constants
DEMO_DB_PATH = PROJECT_ROOT / "demo.db"

DEMO_CITY = {
    "cityName": "Lisbon",
    "country": "Portugal",
    "overview": "Sunny coastal capital with good public hospitals.",
    "generalRating": 4.5,
}

DEMO_DESCRIPTION = (
    "Tap water is safe to drink and pharmacies are easy to find. "
    "English is widely spoken in hospitals and clinics."
)

DEMO_GENERAL_RATINGS = [4, 5, 3.5]

DEMO_HEALTH_RATINGS = [
    {"languageSupport": 4, "waterSafety": 5, "foodSafety": 4.5, "healthRisk": 1, "airQuality": 4},
    {"languageSupport": 3.5, "waterSafety": 4.5, "foodSafety": 4, "healthRisk": 1.5, "airQuality": 3.5},
]

DEMO_HOSPITALS = [
    {
        "name": "Hospital de Santa Maria",
        "address": "Av. Prof. Egas Moniz, 1649-035 Lisboa",
        "contact": "+351 217 805 000",
        "open24Hours": True,
    },
    {
        "name": "Hospital CUF Descobertas",
        "address": "R. Mário Botas, 1998-018 Lisboa",
        "contact": "+351 210 025 200",
        "open24Hours": True,
    },
]

DEMO_VACCINES = [
    {"vaccine": "Hepatitis A", "importance": 2},
    {"vaccine": "Tetanus", "importance": 1},
]

DEMO_ILLNESSES = [
    {"illness": "Traveller's diarrhoea"},
    {"illness": "Sunburn"},
]

DEMO_EMERGENCY = {
    "emergencyPhone": "112",
    "ambulanceService": {
        "available": True,
        "lowestFees": 0,
        "highestFees": 150,
        "responseTime": "15 minutes",
    },
}

DEMO_INSURANCE = {"internationalAccepted": True, "travelInsuranceRecommended": True}


def seed_database() -> str | None:
    """Seed the demo city.

    Returns:
        ID of the new city, or None if it already existed.
    """
    init_db(DEMO_DB_PATH)
    session = get_session(DEMO_DB_PATH)

    try:
        # Check if already seeded
        existing = (
            session.query(City).filter(City.city_name == DEMO_CITY["cityName"]).first()
        )

        if existing:
            print(f"Demo city already exists: {existing.id}")
            return None

        print("Creating city...")
        city, _ = cities.create_city(session, DEMO_CITY)
        cities.set_description(session, city.id, {"description": DEMO_DESCRIPTION})

        print("Adding ratings...")
        for value in DEMO_GENERAL_RATINGS:
            ratings.submit_general_rating(session, city.id, {"rating": value})
        for health in DEMO_HEALTH_RATINGS:
            ratings.submit_health_rating(session, city.id, health)

        print("Adding facilities...")
        facilities.add_hospitals(session, city.id, DEMO_HOSPITALS)
        facilities.add_vaccines(session, city.id, DEMO_VACCINES)
        facilities.add_illnesses(session, city.id, DEMO_ILLNESSES)

        print("Adding emergency and insurance info...")
        emergency.create_emergency_info(session, city.id, DEMO_EMERGENCY)
        insurance.create_insurance_info(session, city.id, DEMO_INSURANCE)

        detail = get_city_detail(session, city.id)
        print(f"  Average general rating: {detail.average_general_rating}")
        print(f"  Average health ratings: {detail.average_health_ratings.model_dump(by_alias=True)}")

        print("Database seeded successfully!")
        return city.id

    finally:
        session.close()


def main() -> int:
    """Main entry point."""
    print("=" * 60)
    print("Health Travel Demo Seeding Script")
    print("=" * 60)

    city_id = seed_database()

    print("\n" + "=" * 60)
    print("Demo seeding complete!")
    print(f"Database: {DEMO_DB_PATH}")
    if city_id:
        print(f"City: {city_id}")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
