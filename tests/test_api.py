"""Tests for the HTTP API."""

from fastapi.testclient import TestClient
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from tabsearch.main import app

NOW = 1_700_000_000_000
DAY_MS = 24 * 60 * 60 * 1000


def _record(id: int, title: str, url: str, age_ms: int = 1000) -> dict:
    return {"id": id, "title": title, "url": url, "last_accessed": NOW - age_ms}


class TestHealth:
    def test_health(self):
        with TestClient(app) as client:
            response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSearchEndpoint:
    def test_search(self):
        payload = {
            "query": "github",
            "now": NOW,
            "records": [
                _record(1, "GitHub - My Repository", "https://github.com/user/my-repo"),
                _record(2, "Stack Overflow", "https://stackoverflow.com/q/1"),
            ],
        }

        with TestClient(app) as client:
            response = client.post("/api/v1/search", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert len(data["results"]) == 1
        result = data["results"][0]
        assert result["matched_field"] == "url"
        assert result["search_tier"] == "tabs-url"
        assert result["highlight"]["text"] == "https://github.com/user/my-repo"
        assert data["destination"] is None

    def test_empty_query_excludes_history(self):
        payload = {
            "query": "",
            "now": NOW,
            "records": [
                _record(1, "A", "https://a.com"),
                _record(2, "B", "https://b.com"),
                _record(3, "C", "https://c.com"),
                _record(-1, "H1", "https://h1.com", age_ms=2 * DAY_MS),
                {**_record(-2, "H2", "https://h2.com"), "is_history_tab": True},
            ],
        }

        with TestClient(app) as client:
            response = client.post("/api/v1/search", json=payload)

        results = response.json()["results"]
        assert [r["item"]["id"] for r in results] == [1, 2, 3]
        assert not any(r["search_tier"].startswith("history") for r in results)

    def test_no_match_returns_destination(self):
        payload = {
            "query": "nonexistentxyzabc123",
            "now": NOW,
            "records": [_record(1, "A", "https://a.com")],
        }

        with TestClient(app) as client:
            response = client.post("/api/v1/search", json=payload)

        data = response.json()
        assert data["results"] == []
        assert data["destination"] == "https://www.google.com/search?q=nonexistentxyzabc123"

    def test_invalid_record_returns_422(self):
        payload = {"query": "a", "records": [{"id": "not-a-number", "last_accessed": 0}]}

        with TestClient(app) as client:
            response = client.post("/api/v1/search", json=payload)

        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "Validation Error"
        assert "records" in data["detail"]
        assert data["request_id"]

    @given(query=st.text(max_size=30))
    @settings(
        max_examples=50,
        deadline=None,
        suppress_health_check=[HealthCheck.function_scoped_fixture],
    )
    def test_any_query_succeeds(self, query):
        payload = {
            "query": query,
            "now": NOW,
            "records": [_record(1, "Docs", "https://docs.example")],
        }

        with TestClient(app) as client:
            response = client.post("/api/v1/search", json=payload)

        assert response.status_code == 200


class TestDestinationEndpoint:
    def test_url_query(self):
        with TestClient(app) as client:
            response = client.get("/api/v1/destination", params={"query": "github.com"})

        assert response.status_code == 200
        assert response.json() == {
            "query": "github.com",
            "is_url": True,
            "destination": "https://github.com",
        }

    def test_text_query(self):
        with TestClient(app) as client:
            response = client.get("/api/v1/destination", params={"query": "tab search"})

        data = response.json()
        assert data["is_url"] is False
        assert data["destination"].endswith("tab%20search")

    def test_blank_query_rejected(self):
        with TestClient(app) as client:
            response = client.get("/api/v1/destination", params={"query": "  "})

        assert response.status_code == 400
        assert "blank" in response.json()["detail"]

    def test_missing_query_rejected(self):
        with TestClient(app) as client:
            response = client.get("/api/v1/destination")

        assert response.status_code == 422


class TestRecordsEndpoint:
    def test_collect_records(self):
        payload = {
            "current_window_id": 1,
            "now": NOW,
            "tabs": [
                {"id": 1, "title": "A", "url": "https://a.com", "window_id": 1},
                {"id": 2, "title": "B", "url": "https://b.com", "window_id": 1, "active": True},
            ],
            "history": [
                {"url": "https://a.com", "title": "A", "last_visit_time": NOW - 10},
                {"url": "https://h.com", "title": "H", "last_visit_time": NOW - 5000},
            ],
        }

        with TestClient(app) as client:
            response = client.post("/api/v1/records", json=payload)

        assert response.status_code == 200
        records = response.json()
        assert [r["id"] for r in records] == [2, 1, -1]
        assert records[-1]["is_history_tab"] is True
