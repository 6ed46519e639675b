from __future__ import annotations

import threading

from google.api_core.exceptions import ServiceUnavailable

from school_manager.health.controller import PROBE_COLLECTION


def test_health_reports_connected_store(client):
    response = client.get("/api/test/health")

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["status"] == "UP"
    assert data["firebase"] == "CONNECTED"


def test_health_stays_up_when_the_store_is_down(client, fake_client):
    fake_client.fail_with = ServiceUnavailable("down")

    response = client.get("/api/test/health")

    assert response.status_code == 200
    assert response.get_json()["data"]["firebase"] == "DISCONNECTED"


def test_health_does_not_wait_on_a_hung_store(client, fake_client):
    fake_client.gate = threading.Event()
    try:
        data = client.get("/api/test/health").get_json()["data"]
    finally:
        fake_client.gate.set()

    assert data["firebase"] == "DISCONNECTED"


def test_write_then_read_probe(client, fake_client):
    written = client.get("/api/test/firebase").get_json()["data"]

    assert written["collection"] == PROBE_COLLECTION
    assert written["documentId"] in fake_client.data[PROBE_COLLECTION]
    read = client.get("/api/test/firebase/read").get_json()
    assert read["message"] == "Found 1 test documents"
    assert read["data"][0]["message"] == "Hello Firebase!"


def test_cors_headers_for_allowed_origins(client):
    allowed = client.get("/api/test/health", headers={"Origin": "http://localhost:5173"})
    other = client.get("/api/test/health", headers={"Origin": "https://evil.test"})

    assert allowed.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"
    assert allowed.headers["Access-Control-Allow-Credentials"] == "true"
    assert allowed.headers["Access-Control-Max-Age"] == "3600"
    assert "Access-Control-Allow-Origin" not in other.headers


def test_cors_preflight(client):
    response = client.options(
        "/api/students",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Headers"] == "Content-Type"
    assert "POST" in response.headers["Access-Control-Allow-Methods"]
