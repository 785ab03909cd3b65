"""Destination suggestions: catalog queries and the static fallback."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from conftest import FakeSession
from core.exceptions import CatalogUnavailableError
from crud.destination_suggestions import search_destinations
from services.destinations import STATIC_CATALOG, static_suggestions, suggest_destinations


def _row(name: str, score: int, **extra) -> SimpleNamespace:
    fields = {
        "name": name,
        "country": "Somewhere",
        "continent": "Europe",
        "description": None,
        "popular_for": ["Food"],
        "best_time": None,
        "coordinates": {"lat": 1.5, "lng": 2.5},
        "popularity_score": score,
    }
    fields.update(extra)
    return SimpleNamespace(**fields)


def _sql(session: FakeSession) -> str:
    return str(
        session.statements[0].compile(
            dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True}
        )
    )


class TestCatalogQuery:
    @pytest.mark.asyncio
    async def test_empty_query_returns_top_n_by_popularity(self) -> None:
        session = FakeSession(rows=[_row("Paris", 100), _row("Tokyo", 95)])

        rows = await search_destinations(session, "   ", 2)

        assert [r.name for r in rows] == ["Paris", "Tokyo"]
        sql = _sql(session)
        assert "WHERE" not in sql
        assert "ORDER BY destination_suggestions.popularity_score DESC" in sql
        assert "LIMIT 2" in sql

    @pytest.mark.asyncio
    async def test_query_matches_name_country_and_description(self) -> None:
        session = FakeSession()

        await search_destinations(session, "par", 10)

        compiled = session.statements[0].compile(dialect=postgresql.dialect())
        sql = str(compiled).lower()
        for column in ("name", "country", "description"):
            assert f"destination_suggestions.{column} ilike" in sql
        assert set(compiled.params.values()) >= {"%par%", 10}

    @pytest.mark.asyncio
    async def test_database_errors_become_catalog_unavailable(self) -> None:
        session = FakeSession(error=OperationalError("SELECT", {}, Exception("down")))

        with pytest.raises(CatalogUnavailableError):
            await search_destinations(session, "", 10)

    @pytest.mark.asyncio
    async def test_connection_refused_becomes_catalog_unavailable(self) -> None:
        session = FakeSession(error=ConnectionRefusedError("no postgres"))

        with pytest.raises(CatalogUnavailableError):
            await search_destinations(session, "", 10)


class TestSuggestionService:
    @pytest.mark.asyncio
    async def test_catalog_rows_are_mapped(self) -> None:
        session = FakeSession(rows=[_row("Porto", 42, popular_for=["Wine", "Food"])])

        result = await suggest_destinations(session, "por", 5)

        assert result.source == "catalog"
        suggestion = result.suggestions[0]
        assert suggestion.name == "Porto"
        assert suggestion.popular_for == ["Wine", "Food"]
        assert suggestion.coordinates is not None
        assert suggestion.coordinates.lat == 1.5
        assert suggestion.popularity_score == 42

    @pytest.mark.asyncio
    async def test_catalog_outage_uses_static_list(self) -> None:
        session = FakeSession(error=ConnectionRefusedError("no postgres"))

        result = await suggest_destinations(session, "", 3)

        assert result.source == "fallback"
        assert [s.name for s in result.suggestions] == ["Paris", "Tokyo", "New York"]


class TestStaticSuggestions:
    def test_empty_query_is_sorted_by_popularity(self) -> None:
        names = [s.name for s in static_suggestions("", 50)]

        assert len(names) == len(STATIC_CATALOG)
        scores = [s.popularity_score for s in static_suggestions("", 50)]
        assert scores == sorted(scores, reverse=True)
        assert names[0] == "Paris"

    def test_matches_tags_case_insensitively(self) -> None:
        names = [s.name for s in static_suggestions("FOOD", 10)]

        # "Street Food" counts as a food tag
        assert names == [
            "Paris",
            "Tokyo",
            "New York",
            "Rome",
            "Barcelona",
            "Bangkok",
            "Singapore",
        ]

    def test_matches_continent(self) -> None:
        names = [s.name for s in static_suggestions("asia", 10)]

        assert names == ["Tokyo", "Bangkok", "Dubai", "Singapore"]

    def test_respects_limit(self) -> None:
        assert len(static_suggestions("", 2)) == 2

    def test_no_match(self) -> None:
        assert static_suggestions("atlantis", 10) == []


class TestSuggestionsEndpoint:
    def test_empty_query_returns_most_popular(
        self, client: TestClient, override_db
    ) -> None:
        override_db(FakeSession(rows=[_row("Paris", 100), _row("Tokyo", 95)]))

        response = client.post("/api/v1/destinations/suggestions", json={"limit": 2})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["source"] == "catalog"
        assert [s["name"] for s in data["suggestions"]] == ["Paris", "Tokyo"]
        assert data["suggestions"][0]["popularityScore"] == 100

    def test_outage_falls_back_with_200(self, client: TestClient, override_db) -> None:
        override_db(FakeSession(error=ConnectionRefusedError("no postgres")))

        response = client.post(
            "/api/v1/destinations/suggestions", json={"query": "rome"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["data"]["source"] == "fallback"
        assert body["message"] == "Using fallback suggestions"
        assert [s["name"] for s in body["data"]["suggestions"]] == ["Rome"]

    @pytest.mark.parametrize("limit", [0, 51])
    def test_limit_bounds(self, client: TestClient, override_db, limit: int) -> None:
        override_db(FakeSession())

        response = client.post(
            "/api/v1/destinations/suggestions", json={"query": "", "limit": limit}
        )

        assert response.status_code == 422
