"""Health & Greeting — liveness, readiness and /api/hello."""

from portfolio_api.infrastructure.database import DatabaseSessionManager


async def test_hello_returns_greeting(client):
    res = await client.get("/api/hello")

    assert res.status_code == 200
    assert res.json() == {"message": "Halo dari backend!"}


async def test_liveness_always_healthy(client):
    res = await client.get("/api/health")

    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_reachable_store(client):
    res = await client.get("/api/health/ready")

    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_with_unreachable_store(client, monkeypatch):
    async def _down(self):
        return False

    monkeypatch.setattr(DatabaseSessionManager, "health_check", _down)

    res = await client.get("/api/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_cors_allows_configured_origin(client):
    res = await client.get(
        "/api/hello", headers={"Origin": "http://localhost:3000"},
    )

    assert res.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert res.headers["access-control-allow-credentials"] == "true"
