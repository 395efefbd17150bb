from portfolio_cms.core.config import settings


def test_health_reports_database(client, monkeypatch):
    monkeypatch.setattr(settings, "health__check_database", True)

    response = client.get("/api/v1/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["cache_enabled"] is False
    assert body["components"]["database"]["status"] == "healthy"
    assert "redis" not in body["components"]


def test_health_ignores_redis_when_cache_is_off(client, monkeypatch):
    async def down():
        return {"status": "unhealthy", "error": "connection refused"}

    monkeypatch.setattr(settings, "health__check_redis", True)
    monkeypatch.setattr(
        "portfolio_cms.api.v1.endpoints.health.test_redis_connection", down
    )

    body = client.get("/api/v1/health").json()

    assert body["components"]["redis"]["status"] == "unhealthy"
    assert body["components"]["redis"]["error"] == "connection refused"
    assert body["status"] == "healthy"


def test_health_fails_when_cache_needs_redis(client, monkeypatch):
    async def down():
        return {"status": "unhealthy", "error": "connection refused"}

    monkeypatch.setattr(settings, "health__check_redis", True)
    monkeypatch.setattr(settings, "cache__enabled", True)
    monkeypatch.setattr(
        "portfolio_cms.api.v1.endpoints.health.test_redis_connection", down
    )

    assert client.get("/api/v1/health").json()["status"] == "unhealthy"
