"""Tests for FastAPI endpoints: analyses, history, settings, export, health."""

import pytest
from httpx import ASGITransport, AsyncClient

from healthscore.benchmarks.schema import DEFAULT_BENCHMARKS
from healthscore.main import app, get_base_benchmarks, get_repository
from healthscore.storage import AnalysisRepository, InMemoryStorage
from tests.conftest import make_input_dict


class _FailingStorage(InMemoryStorage):
    async def set_item(self, key, value):
        raise OSError("read-only file system")


@pytest.fixture
def repo():
    repository = AnalysisRepository(InMemoryStorage(), history_limit=5)
    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_base_benchmarks] = lambda: DEFAULT_BENCHMARKS
    yield repository
    app.dependency_overrides.clear()


def _client():
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self):
        async with _client() as client:
            resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_cors_allows_localhost_3000(self):
        async with _client() as client:
            resp = await client.options(
                "/api/analyses",
                headers={
                    "Origin": "http://localhost:3000",
                    "Access-Control-Request-Method": "POST",
                },
            )
        assert resp.headers.get("access-control-allow-origin") == "http://localhost:3000"


class TestAnalyses:
    @pytest.mark.asyncio
    async def test_create_analysis(self, repo):
        async with _client() as client:
            resp = await client.post("/api/analyses", json={"input": make_input_dict()})
        assert resp.status_code == 200
        body = resp.json()
        assert body["total_score"] == 224
        assert body["status"] == "critical"
        assert [p["name"] for p in body["pillars"]] == [
            "database", "reputation", "lead_capture", "omnichannel", "website",
        ]
        current = await repo.load_current_analysis()
        assert current.id == body["id"]

    @pytest.mark.asyncio
    async def test_annual_revenue_scales_reputation(self, repo):
        async with _client() as client:
            resp = await client.post(
                "/api/analyses",
                json={"input": make_input_dict(), "annual_revenue": 1_000_000},
            )
        reputation = resp.json()["pillars"][1]
        assert reputation["revenue_impact"] == 42_000

    @pytest.mark.asyncio
    async def test_invalid_input_lists_all_errors(self, repo):
        payload = make_input_dict(googleStarRating=7, availableChannels=[])
        async with _client() as client:
            resp = await client.post("/api/analyses", json={"input": payload})
        assert resp.status_code == 422
        paths = sorted(e["path"] for e in resp.json()["errors"])
        assert paths == ["availableChannels", "googleStarRating"]
        assert await repo.load_history() == []

    @pytest.mark.asyncio
    async def test_history_and_lookup(self, repo):
        async with _client() as client:
            first = (await client.post("/api/analyses", json={"input": make_input_dict()})).json()
            second = (
                await client.post("/api/analyses", json={"input": make_input_dict(dailyCalls=5)})
            ).json()
            history = (await client.get("/api/analyses")).json()
            current = (await client.get("/api/analyses/current")).json()
            found = await client.get(f"/api/analyses/{first['id']}")
            missing = await client.get("/api/analyses/nope")
        assert [a["id"] for a in history["analyses"]] == [second["id"], first["id"]]
        assert current["id"] == second["id"]
        assert found.status_code == 200
        assert found.json()["id"] == first["id"]
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_one_and_clear(self, repo):
        async with _client() as client:
            created = (await client.post("/api/analyses", json={"input": make_input_dict()})).json()
            deleted = await client.delete(f"/api/analyses/{created['id']}")
            again = await client.delete(f"/api/analyses/{created['id']}")
            await client.post("/api/analyses", json={"input": make_input_dict()})
            cleared = await client.delete("/api/analyses")
            history = (await client.get("/api/analyses")).json()
        assert deleted.status_code == 204
        assert again.status_code == 404
        assert cleared.status_code == 204
        assert history == {"analyses": []}

    @pytest.mark.asyncio
    async def test_no_current_analysis(self, repo):
        async with _client() as client:
            resp = await client.get("/api/analyses/current")
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_storage_failure_returns_500(self):
        app.dependency_overrides[get_repository] = lambda: AnalysisRepository(_FailingStorage())
        app.dependency_overrides[get_base_benchmarks] = lambda: DEFAULT_BENCHMARKS
        try:
            async with _client() as client:
                resp = await client.post("/api/analyses", json={"input": make_input_dict()})
        finally:
            app.dependency_overrides.clear()
        assert resp.status_code == 500
        assert resp.json() == {"error": "Operation failed"}


class TestSettingsEndpoints:
    @pytest.mark.asyncio
    async def test_defaults(self, repo):
        async with _client() as client:
            resp = await client.get("/api/settings")
        assert resp.json() == {
            "currency": "USD",
            "language": "de",
            "theme": "auto",
            "customBenchmarks": None,
        }

    @pytest.mark.asyncio
    async def test_custom_benchmarks_apply_to_new_analyses(self, repo):
        async with _client() as client:
            updated = await client.put(
                "/api/settings",
                json={"customBenchmarks": {"database": {"reactivationRate": 0.5}}},
            )
            benchmarks = (await client.get("/api/benchmarks")).json()
            analysis = (await client.post("/api/analyses", json={"input": make_input_dict()})).json()
        assert updated.status_code == 200
        assert benchmarks["defaults"]["database"]["reactivation_rate"] == 0.25
        assert benchmarks["effective"]["database"]["reactivation_rate"] == 0.5
        assert analysis["pillars"][0]["revenue_impact"] == 7_200_000

    @pytest.mark.asyncio
    async def test_invalid_update(self, repo):
        async with _client() as client:
            resp = await client.put("/api/settings", json={"theme": "neon"})
        assert resp.status_code == 422
        assert resp.json()["errors"][0]["path"] == "theme"

    @pytest.mark.asyncio
    async def test_reset(self, repo):
        async with _client() as client:
            await client.put("/api/settings", json={"currency": "EUR"})
            resp = await client.post("/api/settings/reset")
        assert resp.json()["currency"] == "USD"


class TestDataEndpoints:
    @pytest.mark.asyncio
    async def test_export_and_delete_all(self, repo):
        async with _client() as client:
            await client.post("/api/analyses", json={"input": make_input_dict()})
            exported = await client.get("/api/export")
            deleted = await client.delete("/api/data")
            current = await client.get("/api/analyses/current")
        assert exported.headers["content-type"].startswith("application/json")
        assert len(exported.json()["history"]["analyses"]) == 1
        assert deleted.status_code == 204
        assert current.status_code == 404


class TestRun:
    def test_run_serves_app_with_uvicorn(self, monkeypatch):
        import healthscore.main as main

        calls = []
        monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
        main.run()
        assert calls == [(
            ("healthscore.main:app",),
            {
                "host": main.settings.host,
                "port": main.settings.port,
                "log_level": main.settings.log_level.lower(),
            },
        )]
