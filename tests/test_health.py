def test_health_check(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "connected"


def test_root(client):
    assert client.get("/").json() == {"status": "JobTrack API running"}
