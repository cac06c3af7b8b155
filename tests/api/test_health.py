from unittest.mock import AsyncMock

from sqlalchemy.exc import OperationalError

from podcast_analytics.boundary.db.connection import get_async_db


def _db_override(session):
    async def _get_db():
        yield session

    return _get_db


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_db(app, client):
    session = AsyncMock()
    app.dependency_overrides[get_async_db] = _db_override(session)

    response = client.get("/api/v1/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}
    session.execute.assert_awaited_once()


def test_health_check_db_unreachable(app, client):
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
    app.dependency_overrides[get_async_db] = _db_override(session)

    response = client.get("/api/v1/health/db")

    assert response.status_code == 503
    assert response.json() == {
        "success": False,
        "error": "Database connection failed",
        "details": None,
    }


def test_security_headers(client):
    response = client.get("/api/v1/health")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
