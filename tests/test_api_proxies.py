"""Tests for proxy API endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from proxygen.api.dependencies import get_reference_store
from proxygen.main import app
from proxygen.services.card_database import ReferenceStore


@pytest.fixture
async def client(store: ReferenceStore):
    """Provide an async test client backed by the sample reference store."""
    app.dependency_overrides[get_reference_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


class TestResolveProxies:
    async def test_resolves_decklist(self, client: AsyncClient, sample_decklist: str) -> None:
        response = await client.post("/proxies", json={"decklist": sample_decklist})

        assert response.status_code == 200
        data = response.json()
        assert data["outcome"] == "success"
        assert data["failure"] is None
        assert data["data"]["total_copies"] == 9

        entries = data["data"]["entries"]
        assert [e["count"] for e in entries] == [4, 2, 1, 1, 1]
        assert entries[0]["entity"]["type"] == "Creature"
        assert entries[0]["entity"]["name"] == "Snapcaster Mage"
        assert entries[3]["entity"]["type"] == "TwoPart"
        assert entries[3]["entity"]["kind"] == "split"
        assert entries[4]["entity"]["second"]["name"] == "Insectile Aberration"

    async def test_unknown_card_is_known_failure(self, client: AsyncClient) -> None:
        response = await client.post("/proxies", json={"decklist": "1x Not A Real Card"})

        assert response.status_code == 404
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "invalid_card_name"
        assert data["failure"]["detail"] == "not a real card"

    async def test_malformed_line(self, client: AsyncClient) -> None:
        response = await client.post("/proxies", json={"decklist": "4x"})

        assert response.status_code == 400
        assert response.json()["failure"]["kind"] == "decklist_parse_error"

    async def test_too_many_cards(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("proxygen.api.proxies.settings.max_total_count", 4)

        response = await client.post("/proxies", json={"decklist": "3x Island\n3x Mountain"})

        assert response.status_code == 400
        assert response.json()["failure"]["kind"] == "too_many_cards"

    async def test_malformed_composite(self, client: AsyncClient) -> None:
        response = await client.post("/proxies", json={"decklist": "Nameless Flip"})

        assert response.status_code == 422
        assert response.json()["failure"]["kind"] == "multicard_no_names"

    async def test_missing_decklist_field(self, client: AsyncClient) -> None:
        response = await client.post("/proxies", json={})

        assert response.status_code == 422


class TestRenderProxies:
    async def test_renders_html_sheet(self, client: AsyncClient) -> None:
        response = await client.post("/proxies/html", data={"decklist": "2x Lightning Bolt"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.text.count("<b>Lightning Bolt</b>") == 2

    async def test_html_failure_uses_envelope(self, client: AsyncClient) -> None:
        response = await client.post("/proxies/html", data={"decklist": "1 Nope"})

        assert response.status_code == 404
        assert response.json()["outcome"] == "known_failure"


class TestStoreNotLoaded:
    async def test_service_unavailable_without_store(self) -> None:
        """Without a loaded store the endpoints answer 503 instead of crashing."""
        app.state.reference_store = None
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post("/proxies", json={"decklist": "Island"})

        assert response.status_code == 503
        assert response.json()["failure"]["kind"] == "service_unavailable"
