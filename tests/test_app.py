from app.core.config import settings


def test_status_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert settings.app_name in response.text
    assert 'href="/sweets"' in response.text


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/no-such-page")
    assert response.status_code == 404
    assert "error" in response.json()
