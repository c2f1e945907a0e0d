from input_guard.shared.config import settings


def test_health_check_returns_ok(api_client) -> None:
    response = api_client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": settings.app_version}
