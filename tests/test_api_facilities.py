"""Tests for hospital, vaccine and illness API endpoints."""

from sqlalchemy.orm import Session

from healthtravel.db.schema import City, Hospital

HOSPITAL = {"name": "A", "address": "x", "contact": "1", "open24Hours": True}


def seed_city_with_hospitals(engine):
    """City c1 with hospitals H1 and H2."""
    with Session(engine) as db_session:
        db_session.add(
            City(id="c1", city_name="Lisbon", country="Portugal", overview="Coastal capital")
        )
        db_session.add_all(
            [
                Hospital(
                    id="H1", city_id="c1", name="Santa Maria", address="Av. Egas Moniz",
                    contact="217805000", open_24_hours=True,
                ),
                Hospital(
                    id="H2", city_id="c1", name="CUF", address="R. Mário Botas",
                    contact="210025200", open_24_hours=False,
                ),
            ]
        )
        db_session.commit()


class TestHospitals:
    """Hospital endpoints."""

    def test_replace_all(self, client, engine):
        """PUT swaps the whole set; old ids are gone."""
        seed_city_with_hospitals(engine)

        response = client.put("/api/cities/c1/hospitals", json={"hospitals": [HOSPITAL]})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "1 hospital(s) updated successfully.",
            "count": 1,
        }

        hospitals = client.get("/api/cities/c1/hospitals").json()
        assert len(hospitals) == 1
        assert hospitals[0]["name"] == "A"
        assert hospitals[0]["open24Hours"] is True
        assert hospitals[0]["id"] not in {"H1", "H2"}
        assert client.get("/api/hospitals/H1").status_code == 404

    def test_replace_with_missing_field_changes_nothing(self, client, engine):
        """A single incomplete element is a 400 and leaves H1/H2."""
        seed_city_with_hospitals(engine)
        incomplete = {k: v for k, v in HOSPITAL.items() if k != "contact"}

        response = client.put(
            "/api/cities/c1/hospitals", json={"hospitals": [HOSPITAL, incomplete]}
        )

        assert response.status_code == 400
        ids = sorted(h["id"] for h in client.get("/api/cities/c1/hospitals").json())
        assert ids == ["H1", "H2"]

    def test_replace_with_empty_list_is_400(self, client, engine):
        """An empty replacement set is rejected."""
        seed_city_with_hospitals(engine)
        response = client.put("/api/cities/c1/hospitals", json={"hospitals": []})
        assert response.status_code == 400

    def test_replace_unknown_city_is_404(self, client):
        """Replacing under a missing city is 404."""
        response = client.put("/api/cities/missing/hospitals", json={"hospitals": [HOSPITAL]})
        assert response.status_code == 404

    def test_create_and_batch(self, client, engine):
        """Single and batch creates append to the set."""
        seed_city_with_hospitals(engine)

        response = client.post("/api/cities/c1/hospitals", json=HOSPITAL)
        assert response.status_code == 201
        assert response.json()["cityId"] == "c1"

        response = client.post(
            "/api/cities/c1/hospitals/batch",
            json={"hospitals": [HOSPITAL, {**HOSPITAL, "open24Hours": False}]},
        )
        assert response.status_code == 201
        assert response.json()["count"] == 2

        assert len(client.get("/api/cities/c1/hospitals").json()) == 5

    def test_get_one(self, client, engine):
        """Single hospital by id."""
        seed_city_with_hospitals(engine)

        data = client.get("/api/hospitals/H2").json()
        assert data["name"] == "CUF"
        assert data["open24Hours"] is False

    def test_bulk_delete(self, client, engine):
        """DELETE with an id list removes those hospitals."""
        seed_city_with_hospitals(engine)

        response = client.request("DELETE", "/api/hospitals", json={"ids": ["H1"]})

        assert response.status_code == 200
        assert response.json()["count"] == 1
        ids = [h["id"] for h in client.get("/api/cities/c1/hospitals").json()]
        assert ids == ["H2"]

    def test_bulk_delete_errors(self, client, engine):
        """Empty ids is 400; unknown ids is 404."""
        seed_city_with_hospitals(engine)

        assert client.request("DELETE", "/api/hospitals", json={"ids": []}).status_code == 400
        assert client.request("DELETE", "/api/hospitals", json={"ids": ["nope"]}).status_code == 404

    def test_empty_list_is_404(self, client, engine):
        """City without hospitals is 404 on list."""
        with Session(engine) as db_session:
            db_session.add(City(id="c2", city_name="Porto", country="Portugal", overview="North"))
            db_session.commit()

        assert client.get("/api/cities/c2/hospitals").status_code == 404


class TestVaccines:
    """Vaccine endpoints."""

    def test_replace_requires_vaccine_name(self, client, engine):
        """[{importance: 2}] is a 400."""
        seed_city_with_hospitals(engine)
        response = client.put("/api/cities/c1/vaccines", json={"vaccines": [{"importance": 2}]})
        assert response.status_code == 400

    def test_lifecycle(self, client, engine):
        """Create, replace, read and delete vaccines."""
        seed_city_with_hospitals(engine)

        created = client.post(
            "/api/cities/c1/vaccines", json={"vaccine": "Rabies", "importance": 1}
        ).json()
        assert created["vaccine"] == "Rabies"

        response = client.put(
            "/api/cities/c1/vaccines",
            json={"vaccines": [{"vaccine": "Typhoid", "importance": 2}, {"vaccine": "Hep A", "importance": 3}]},
        )
        assert response.json()["message"] == "2 vaccine(s) updated successfully."
        assert client.get(f"/api/vaccines/{created['id']}").status_code == 404

        vaccines = client.get("/api/cities/c1/vaccines").json()
        assert sorted(v["vaccine"] for v in vaccines) == ["Hep A", "Typhoid"]

        response = client.request("DELETE", "/api/vaccines", json={"ids": [v["id"] for v in vaccines]})
        assert response.json()["count"] == 2
        assert client.get("/api/cities/c1/vaccines").status_code == 404


class TestIllnesses:
    """Common illness endpoints."""

    def test_lifecycle(self, client, engine):
        """Batch add, replace and delete illnesses."""
        seed_city_with_hospitals(engine)

        response = client.post(
            "/api/cities/c1/illnesses/batch",
            json={"illnesses": [{"illness": "Dengue"}, {"illness": "Zika"}]},
        )
        assert response.status_code == 201
        assert response.json()["message"] == "2 illness(es) created successfully."

        response = client.put(
            "/api/cities/c1/illnesses", json={"illnesses": [{"illness": "Malaria"}]}
        )
        assert response.status_code == 200

        illnesses = client.get("/api/cities/c1/illnesses").json()
        assert [i["illness"] for i in illnesses] == ["Malaria"]

        response = client.delete(f"/api/illnesses/{illnesses[0]['id']}")
        assert response.json()["success"] is True
        assert client.get(f"/api/illnesses/{illnesses[0]['id']}").status_code == 404


class TestVaccineImportanceRange:
    """importance must fit a 64-bit SQLite integer."""

    def test_too_large_importance_is_400(self, client, engine):
        """Values past the integer range are rejected, not a storage crash."""
        seed_city_with_hospitals(engine)

        response = client.post(
            "/api/cities/c1/vaccines", json={"vaccine": "Rabies", "importance": 2**63}
        )
        assert response.status_code == 400

        response = client.put(
            "/api/cities/c1/vaccines", json={"vaccines": [{"vaccine": "Rabies", "importance": 2**64}]}
        )
        assert response.status_code == 400

    def test_largest_importance_is_stored(self, client, engine):
        """The top of the range round-trips."""
        seed_city_with_hospitals(engine)

        response = client.post(
            "/api/cities/c1/vaccines", json={"vaccine": "Rabies", "importance": 2**63 - 1}
        )

        assert response.status_code == 201
        assert response.json()["importance"] == 2**63 - 1
