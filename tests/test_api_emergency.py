"""Tests for emergency and insurance info API endpoints."""

from sqlalchemy.orm import Session

from healthtravel.db.schema import City

EMERGENCY = {
    "emergencyPhone": "112",
    "ambulanceService": {
        "available": True,
        "lowestFees": 0,
        "highestFees": 120.5,
        "responseTime": "15 minutes",
    },
}

INSURANCE = {"internationalAccepted": True, "travelInsuranceRecommended": True}


def seed_city(engine, city_id="c1"):
    with Session(engine) as db_session:
        db_session.add(
            City(id=city_id, city_name="Lisbon", country="Portugal", overview="Coastal capital")
        )
        db_session.commit()


class TestEmergencyInfo:
    """Emergency info endpoints."""

    def test_create_and_get(self, client, engine):
        """Created info includes its ambulance service."""
        seed_city(engine)

        response = client.post("/api/cities/c1/emergency", json=EMERGENCY)
        assert response.status_code == 201

        data = client.get("/api/cities/c1/emergency").json()
        assert data["emergencyPhone"] == "112"
        assert data["ambulanceService"]["highestFees"] == 120.5
        assert data["ambulanceService"]["responseTime"] == "15 minutes"

    def test_missing_phone_is_400(self, client, engine):
        """emergencyPhone is required."""
        seed_city(engine)
        response = client.post("/api/cities/c1/emergency", json={"ambulanceService": {"available": True}})
        assert response.status_code == 400

    def test_fees_out_of_range_is_400(self, client, engine):
        """Fees above the maximum are rejected."""
        seed_city(engine)
        body = {
            "emergencyPhone": "112",
            "ambulanceService": {"available": True, "highestFees": 1e12},
        }
        response = client.post("/api/cities/c1/emergency", json=body)
        assert response.status_code == 400

    def test_unknown_city_is_404(self, client):
        """Creating for a missing city is 404."""
        assert client.post("/api/cities/missing/emergency", json=EMERGENCY).status_code == 404
        assert client.get("/api/cities/missing/emergency").status_code == 404

    def test_duplicate_is_storage_error(self, client, engine):
        """Second info for one city surfaces as a generic 500."""
        seed_city(engine)
        client.post("/api/cities/c1/emergency", json=EMERGENCY)

        response = client.post("/api/cities/c1/emergency", json=EMERGENCY)

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal storage error. Please try again later."}

    def test_partial_update(self, client, engine):
        """Only the given fields change."""
        seed_city(engine)
        info_id = client.post("/api/cities/c1/emergency", json=EMERGENCY).json()["id"]

        response = client.put(f"/api/emergency/{info_id}", json={"emergencyPhone": "999"})

        assert response.status_code == 200
        data = response.json()
        assert data["emergencyPhone"] == "999"
        assert data["ambulanceService"]["available"] is True

    def test_partial_ambulance_update_keeps_other_fields(self, client, engine):
        """Ambulance fields left out of the body keep their stored values."""
        seed_city(engine)
        info_id = client.post("/api/cities/c1/emergency", json=EMERGENCY).json()["id"]

        response = client.put(
            f"/api/emergency/{info_id}", json={"ambulanceService": {"available": False}}
        )

        assert response.status_code == 200
        ambulance = response.json()["ambulanceService"]
        assert ambulance["available"] is False
        assert ambulance["lowestFees"] == 0
        assert ambulance["highestFees"] == 120.5
        assert ambulance["responseTime"] == "15 minutes"

    def test_explicit_null_clears_ambulance_field(self, client, engine):
        """A field sent as null is cleared."""
        seed_city(engine)
        info_id = client.post("/api/cities/c1/emergency", json=EMERGENCY).json()["id"]

        response = client.put(
            f"/api/emergency/{info_id}",
            json={"ambulanceService": {"available": True, "responseTime": None}},
        )

        ambulance = response.json()["ambulanceService"]
        assert ambulance["responseTime"] is None
        assert ambulance["highestFees"] == 120.5

    def test_delete(self, client, engine):
        """Delete removes the info; a second delete is 404."""
        seed_city(engine)
        info_id = client.post("/api/cities/c1/emergency", json=EMERGENCY).json()["id"]

        assert client.delete(f"/api/emergency/{info_id}").status_code == 200
        assert client.get("/api/cities/c1/emergency").status_code == 404
        assert client.delete(f"/api/emergency/{info_id}").status_code == 404


class TestInsuranceInfo:
    """Insurance info endpoints."""

    def test_lifecycle(self, client, engine):
        """Create, read, update and delete insurance info."""
        seed_city(engine)

        created = client.post("/api/cities/c1/insurance", json=INSURANCE)
        assert created.status_code == 201
        info_id = created.json()["id"]

        response = client.put(
            f"/api/insurance/{info_id}",
            json={"internationalAccepted": False, "travelInsuranceRecommended": True},
        )
        assert response.json()["internationalAccepted"] is False

        data = client.get("/api/cities/c1/insurance").json()
        assert data["internationalAccepted"] is False
        assert data["travelInsuranceRecommended"] is True

        assert client.delete(f"/api/insurance/{info_id}").status_code == 200
        assert client.get("/api/cities/c1/insurance").status_code == 404

    def test_missing_flag_is_400(self, client, engine):
        """Both flags are required."""
        seed_city(engine)
        response = client.post("/api/cities/c1/insurance", json={"internationalAccepted": True})
        assert response.status_code == 400

    def test_shown_in_city_detail(self, client, engine):
        """City detail embeds insurance info."""
        seed_city(engine)
        client.post("/api/cities/c1/insurance", json=INSURANCE)

        detail = client.get("/api/cities/c1").json()
        assert detail["insuranceInfo"]["internationalAccepted"] is True
