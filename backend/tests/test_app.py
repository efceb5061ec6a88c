from fastapi.testclient import TestClient
from feedback_api.main import create_app
from conftest import AUTH


def test_unhandled_error_is_generic_500():
    app = create_app()

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    client = TestClient(app, raise_server_exceptions=False)
    r = client.get("/boom")
    assert r.status_code == 500
    assert r.json() == {"error": "Internal Server Error"}
    assert "secret" not in r.text

def test_unknown_route_uses_error_envelope(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found"}

def test_request_id_is_echoed(client):
    r = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert r.headers["x-request-id"] == "req-123"

def test_request_id_generated(client):
    r = client.get("/health")
    assert r.headers["x-request-id"]

def test_response_time_header(client):
    assert "x-response-time-ms" in client.get("/health").headers

def test_stores_are_per_app():
    a = TestClient(create_app(), headers=AUTH)
    b = TestClient(create_app(), headers=AUTH)
    a.post("/feedback", json={
        "customer_name": "A", "customer_email": "a@b.co", "property_id": "p",
        "rating": 3, "comments": "fine",
    })
    assert len(a.get("/feedback").json()) == 1
    assert b.get("/feedback").json() == []
