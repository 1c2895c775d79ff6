"""Tests for city API endpoints."""

from sqlalchemy.orm import Session

from healthtravel.db.schema import City, GeneralRating, HealthRating

NEW_CITY = {
    "cityName": "Lisbon",
    "country": "Portugal",
    "overview": "Coastal capital",
    "generalRating": 4,
}


def seed_city(engine, city_id="c1", city_name="Lisbon", ratings=(), health=()):
    """Insert a city with optional general and health ratings."""
    with Session(engine) as db_session:
        db_session.add(
            City(id=city_id, city_name=city_name, country="Portugal", overview="Coastal capital")
        )
        for value in ratings:
            db_session.add(GeneralRating(city_id=city_id, rating=value))
        for axes in health:
            db_session.add(
                HealthRating(
                    city_id=city_id,
                    language_support=axes[0],
                    water_safety=axes[1],
                    food_safety=axes[2],
                    health_risk=axes[3],
                    air_quality=axes[4],
                )
            )
        db_session.commit()


class TestCreateCity:
    """POST /api/cities"""

    def test_create_returns_city_with_rating(self, client):
        """New city comes back camelCase with its first rating."""
        response = client.post("/api/cities", json=NEW_CITY)

        assert response.status_code == 201
        data = response.json()
        assert data["cityName"] == "Lisbon"
        assert data["country"] == "Portugal"
        assert data["description"] is None
        assert data["cityImageUrl"] is None
        assert len(data["generalRatings"]) == 1
        assert data["generalRatings"][0]["rating"] == 4
        assert data["generalRatings"][0]["cityId"] == data["id"]

    def test_missing_field_is_400(self, client):
        """Missing overview is rejected before anything is stored."""
        body = {k: v for k, v in NEW_CITY.items() if k != "overview"}
        response = client.post("/api/cities", json=body)

        assert response.status_code == 400
        assert response.json()["errors"]

    def test_rating_out_of_range_is_400(self, client):
        """generalRating above 5 is rejected."""
        response = client.post("/api/cities", json={**NEW_CITY, "generalRating": 5.5})
        assert response.status_code == 400


class TestReadCities:
    """GET /api/cities, /api/cities/overview and /api/cities/{id}"""

    def test_detail_includes_averages(self, client, engine):
        """Averages are derived from the stored ratings."""
        seed_city(engine, ratings=(4, 3), health=((4, 2, 3, 1, 5), (2, 4, 5, 3, 1)))

        response = client.get("/api/cities/c1")

        assert response.status_code == 200
        data = response.json()
        assert data["averageGeneralRating"] == 3.5
        assert data["averageHealthRatings"] == {
            "languageSupport": 3.0,
            "waterSafety": 3.0,
            "foodSafety": 4.0,
            "healthRisk": 2.0,
            "airQuality": 3.0,
        }
        assert len(data["healthRatings"]) == 2
        assert data["hospitals"] == []
        assert data["emergencyInfo"] is None

    def test_detail_without_ratings_has_zeros(self, client, engine):
        """No ratings means zero averages, not an error."""
        seed_city(engine)

        data = client.get("/api/cities/c1").json()

        assert data["averageGeneralRating"] == 0
        assert set(data["averageHealthRatings"].values()) == {0}

    def test_unknown_city_is_404(self, client):
        """Unknown id returns 404."""
        response = client.get("/api/cities/missing")
        assert response.status_code == 404

    def test_list_all(self, client, engine):
        """Every city is listed with its children."""
        seed_city(engine, "c1", "Lisbon", ratings=(5,))
        seed_city(engine, "c2", "Porto")

        data = client.get("/api/cities").json()

        assert {c["cityName"] for c in data} == {"Lisbon", "Porto"}
        assert all("averageHealthRatings" in c for c in data)

    def test_overview(self, client, engine):
        """Overview lists name, country and mean rating."""
        seed_city(engine, "c1", "Lisbon", ratings=(5, 4))

        data = client.get("/api/cities/overview").json()

        assert data == [
            {
                "id": "c1",
                "cityName": "Lisbon",
                "country": "Portugal",
                "overview": "Coastal capital",
                "cityImageUrl": None,
                "averageGeneralRating": 4.5,
            }
        ]


class TestCityFields:
    """Description and image endpoints."""

    def test_description_flow(self, client, engine):
        """Create, read, edit and delete a description."""
        seed_city(engine)

        response = client.post("/api/cities/c1/description", json={"description": "Seven hills"})
        assert response.status_code == 201
        assert response.json()["description"] == "Seven hills"

        response = client.put("/api/cities/c1/description", json={"description": "Trams"})
        assert response.status_code == 200

        response = client.get("/api/cities/c1/description")
        assert response.json() == {"id": "c1", "description": "Trams"}

        response = client.delete("/api/cities/c1/description")
        assert response.status_code == 200
        assert client.get("/api/cities/c1/description").json()["description"] is None

    def test_description_unknown_city(self, client):
        """Unknown city is 404 for reads and writes."""
        assert client.get("/api/cities/missing/description").status_code == 404
        response = client.put("/api/cities/missing/description", json={"description": "x"})
        assert response.status_code == 404

    def test_empty_description_is_400(self, client, engine):
        """Empty description is rejected."""
        seed_city(engine)
        response = client.post("/api/cities/c1/description", json={"description": ""})
        assert response.status_code == 400

    def test_set_image(self, client, engine):
        """Image URL is stored and returned."""
        seed_city(engine)

        response = client.put(
            "/api/cities/c1/image", json={"cityImageUrl": "https://img.example/lisbon.jpg"}
        )

        assert response.status_code == 200
        assert response.json()["cityImageUrl"] == "https://img.example/lisbon.jpg"


class TestHealthCheck:
    """GET /health"""

    def test_health(self, client):
        """Health endpoint responds ok."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
