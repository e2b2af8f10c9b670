"""
RocketLens 테스트 - API 엔드포인트
"""

import inspect

import pytest
import sys
sys.path.insert(0, ".")

from fastapi.testclient import TestClient

from rocketlens.api.main import app
from rocketlens.api.routes import get_crew_repository, get_repository, router
from rocketlens.data_sources.crew_repository import CrewFetchError
from rocketlens.data_sources.rockets_repository import RocketNotFoundError, RocketsFetchError
from rocketlens.schemas.crew import CrewListItem
from rocketlens.schemas.filters import FilterState, Range, YearRange
from rocketlens.schemas.rocket import RocketDetail, RocketListItem, StageDetail
from rocketlens.schemas.text import TextHandle

ROCKETS = [
    RocketListItem(id="1", name="Falcon 1", first_flight="24.03.2006", height=22.25, diameter=1.68, mass=30146),
    RocketListItem(id="2", name="Falcon 9", first_flight="04.06.2010", height=70.0, diameter=3.7, mass=549054),
    RocketListItem(id="3", name="Starship", first_flight="20.04.2023", height=118.0, diameter=9.0, mass=1335000),
]


class FakeRepository:
    def __init__(self, rockets=None, error=None, detail_error=None):
        self.rockets = rockets or []
        self.error = error
        self.detail_error = detail_error
        self.calls = []

    def get_rocket_detail(self, rocket_id: str):
        if self.detail_error:
            raise self.detail_error
        return RocketDetail(
            id=rocket_id,
            name="Falcon 9",
            first_stage=StageDetail(reusable=True, engines=9),
            images=["https://imgur.com/azYafd8.jpg"],
        )

    def get_rockets_list(self, refresh: bool = False):
        self.calls.append(refresh)
        if self.error:
            raise self.error
        return self.rockets


class TestRocketsApi:
    """/api/v1 엔드포인트 테스트"""

    def setup_method(self):
        self.repository = FakeRepository(ROCKETS)
        app.dependency_overrides[get_repository] = lambda: self.repository
        self.client = TestClient(app)

    def teardown_method(self):
        app.dependency_overrides.clear()

    def test_root(self):
        response = self.client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "RocketLens"

    def test_list_rockets(self):
        response = self.client.get("/api/v1/rockets")

        assert response.status_code == 200
        assert [r["name"] for r in response.json()] == ["Falcon 1", "Falcon 9", "Starship"]
        assert self.repository.calls == [False]

    def test_list_rockets_refresh(self):
        self.client.get("/api/v1/rockets", params={"refresh": "true"})
        assert self.repository.calls == [True]

    def test_list_filters(self):
        response = self.client.get("/api/v1/filters")
        body = response.json()

        assert response.status_code == 200
        assert [f["key"] for f in body] == ["name", "first_flight", "height", "diameter", "mass"]
        assert [v["value"] for v in body[0]["values"]] == ["Falcon 1", "Falcon 9", "Starship"]
        assert body[2]["values"][0]["kind"] == "range"
        assert body[2]["extra_params"]["unit"]["resource"] == "unit_meters"

    def test_search_without_filters(self):
        response = self.client.post("/api/v1/rockets/search", json={"query": "falcon"})
        body = response.json()

        assert response.status_code == 200
        assert body["total_count"] == 3
        assert [r["id"] for r in body["rockets"]] == ["1", "2"]

    def test_search_with_filters(self):
        filters = (
            FilterState()
            .toggle("first_flight", YearRange(display_name=TextHandle.dynamic("~2010"), end_year=2010), True)
            .toggle("height", Range(display_name=TextHandle.dynamic("50+"), start=50.0), True)
        )

        response = self.client.post(
            "/api/v1/rockets/search",
            json={"query": "", "filters": filters.model_dump(mode="json")},
        )

        assert response.status_code == 200
        assert [r["id"] for r in response.json()["rockets"]] == ["2"]

    def test_search_invalid_filter_kind(self):
        body = {
            "filters": {
                "selected_filters": {
                    "height": [{"kind": "unknown", "display_name": {"text": "x"}}]
                }
            }
        }
        response = self.client.post("/api/v1/rockets/search", json=body)
        assert response.status_code == 422

    def test_fetch_error_is_bad_gateway(self):
        self.repository.error = RocketsFetchError("SpaceX API 오류 (HTTP 500)")

        response = self.client.get("/api/v1/rockets")

        assert response.status_code == 502
        assert "HTTP 500" in response.json()["detail"]

    def test_filter_state_schema(self):
        response = self.client.get("/api/v1/schema/filter-state")
        assert response.status_code == 200
        assert "selected_filters" in response.json()["properties"]

    def test_rocket_detail(self):
        response = self.client.get("/api/v1/rockets/2")
        body = response.json()

        assert response.status_code == 200
        assert body["id"] == "2"
        assert body["first_stage"]["engines"] == 9
        assert body["second_stage"]["engines"] == -1
        assert body["images"] == ["https://imgur.com/azYafd8.jpg"]

    def test_rocket_detail_not_found(self):
        self.repository.detail_error = RocketNotFoundError("로켓을 찾을 수 없습니다: nope")

        response = self.client.get("/api/v1/rockets/nope")

        assert response.status_code == 404

    def test_rocket_detail_fetch_error(self):
        self.repository.detail_error = RocketsFetchError("SpaceX API 오류 (HTTP 503)")

        response = self.client.get("/api/v1/rockets/2")

        assert response.status_code == 502


class FakeCrewRepository:
    def __init__(self, crew=None, error=None):
        self.crew = crew or []
        self.error = error

    def get_crew(self, refresh: bool = False):
        if self.error:
            raise self.error
        return self.crew


class TestCrewApi:
    """/api/v1/crew 테스트"""

    def setup_method(self):
        self.repository = FakeCrewRepository([
            CrewListItem(name="Robert Behnken", agency="NASA", wikipedia="", status="active"),
        ])
        app.dependency_overrides[get_crew_repository] = lambda: self.repository
        self.client = TestClient(app)

    def teardown_method(self):
        app.dependency_overrides.clear()

    def test_list_crew(self):
        response = self.client.get("/api/v1/crew")

        assert response.status_code == 200
        assert response.json() == [
            {"name": "Robert Behnken", "agency": "NASA", "wikipedia": "", "status": "active"}
        ]

    def test_crew_fetch_error(self):
        self.repository.error = CrewFetchError("SpaceX API 요청 실패")

        response = self.client.get("/api/v1/crew")

        assert response.status_code == 502


class TestRouteDefinitions:
    """블로킹 I/O를 하는 라우트는 일반 함수 (FastAPI 스레드풀에서 실행)"""

    def test_routes_are_sync(self):
        endpoints = {route.path: route.endpoint for route in router.routes}

        for path in ["/rockets", "/filters", "/rockets/search", "/rockets/{rocket_id}", "/crew"]:
            assert not inspect.iscoroutinefunction(endpoints[path]), path


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
