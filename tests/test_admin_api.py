"""Tests for health, metrics and the static file server"""


def test_healthz(client):
    response = client.get("/api/healthz")

    assert response.status_code == 200
    assert response.text == "OK"
    assert response.headers["content-type"].startswith("text/plain")


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "Chirpy API"


def test_fileserver_serves_index(client):
    response = client.get("/app/")

    assert response.status_code == 200
    assert "Welcome to Chirpy" in response.text


def test_metrics_count_fileserver_hits(client):
    client.get("/app/")
    client.get("/app/")
    client.get("/api/healthz")

    response = client.get("/api/metrics")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Chirpy has been visited 2 times!" in response.text


def test_reset_metrics(client):
    client.get("/app/")

    assert client.get("/api/reset").status_code == 200
    assert "visited 0 times" in client.get("/api/metrics").text


def test_cors_headers(client):
    response = client.get("/api/healthz", headers={"Origin": "http://example.com"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_redirect_to_app_counts_once(client):
    response = client.get("/app")

    assert response.status_code == 200
    assert "Chirpy has been visited 1 times!" in client.get("/api/metrics").text
