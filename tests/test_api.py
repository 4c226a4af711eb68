# tests/test_api.py
"""
End-to-end tests for the HTTP surface:
- /health
- POST/GET /tickets
- GET/PATCH /tickets/{id}
- error envelope for 400 / 404
- CORS, configurable field bounds and startup logging
"""

import logging
import uuid

from fastapi.testclient import TestClient

from app import config
from app.main import app


def create(client, title="Fix bug", description="Fix the critical bug"):
    return client.post("/tickets", json={"title": title, "description": description})


# =============================================================================
# health
# =============================================================================

def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "ticket-api"}


# =============================================================================
# full flow
# =============================================================================

def test_create_get_patch_flow(client):
    response = create(client)
    assert response.status_code == 201
    created = response.json()
    assert created["status"] == "ToDo"
    assert created["title"] == "Fix bug"
    assert created["description"] == "Fix the critical bug"
    assert uuid.UUID(created["id"]).version == 4

    response = client.get(f"/tickets/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created

    response = client.patch(f"/tickets/{created['id']}", json={"status": "Done"})
    assert response.status_code == 200
    assert response.json() == {**created, "status": "Done"}

    response = client.get(f"/tickets/{created['id']}")
    assert response.json()["status"] == "Done"


def test_list_returns_array_in_creation_order(client):
    assert client.get("/tickets").json() == []

    ids = [create(client, title=f"ticket {i}").json()["id"] for i in range(3)]

    response = client.get("/tickets")
    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == ids


# =============================================================================
# errors
# =============================================================================

def test_get_unknown_id_is_404(client):
    response = client.get(f"/tickets/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.json() == {"error": "Ticket not found"}


def test_get_malformed_id_is_400(client):
    response = client.get("/tickets/not-a-uuid")
    assert response.status_code == 400
    assert "error" in response.json()


def test_create_with_empty_title_is_400(client):
    response = create(client, title="   ")
    assert response.status_code == 400
    assert response.json() == {"error": "Title cannot be empty"}
    assert client.get("/tickets").json() == []


def test_create_with_missing_field_is_400(client):
    response = client.post("/tickets", json={"title": "No description"})
    assert response.status_code == 400
    assert "description" in response.json()["error"]


def test_create_with_invalid_json_is_400(client):
    response = client.post(
        "/tickets",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body"}


def test_patch_unknown_id_is_404(client):
    response = client.patch(f"/tickets/{uuid.uuid4()}", json={"status": "Done"})
    assert response.status_code == 404
    assert response.json() == {"error": "Ticket not found"}


def test_patch_malformed_id_is_400(client):
    response = client.patch("/tickets/1234", json={"status": "Done"})
    assert response.status_code == 400


def test_patch_with_invalid_title_keeps_ticket(client):
    created = create(client).json()

    response = client.patch(
        f"/tickets/{created['id']}",
        json={"title": "", "status": "InProgress"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Title cannot be empty"}
    assert client.get(f"/tickets/{created['id']}").json() == created


def test_patch_with_unknown_status_is_400(client):
    created = create(client).json()

    response = client.patch(f"/tickets/{created['id']}", json={"status": "Blocked"})
    assert response.status_code == 400
    assert "status" in response.json()["error"]
    assert client.get(f"/tickets/{created['id']}").json() == created


def test_patch_with_long_description_is_400(client):
    created = create(client).json()

    response = client.patch(f"/tickets/{created['id']}", json={"description": "d" * 1001})
    assert response.status_code == 400
    assert response.json() == {"error": "Description cannot be longer than 1000 characters"}


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


# =============================================================================
# CORS
# =============================================================================

def test_preflight_allows_any_origin_without_credentials(client):
    response = client.options(
        "/tickets",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "POST" in response.headers["access-control-allow-methods"]
    assert "access-control-allow-credentials" not in response.headers


def test_simple_request_carries_cors_header(client):
    response = client.get("/tickets", headers={"Origin": "http://example.com"})
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


# =============================================================================
# configurable bounds
# =============================================================================

def test_title_bound_comes_from_config(client, monkeypatch):
    monkeypatch.setattr(config, "TICKET_TITLE_MAX_LENGTH", 5)

    assert create(client, title="short").status_code == 201

    response = create(client, title="too long")
    assert response.status_code == 400
    assert response.json() == {"error": "Title cannot be longer than 5 characters"}


def test_description_bound_comes_from_config(client, monkeypatch):
    created = create(client, description="").json()
    monkeypatch.setattr(config, "TICKET_DESCRIPTION_MAX_LENGTH", 3)

    response = client.patch(f"/tickets/{created['id']}", json={"description": "abcd"})
    assert response.status_code == 400
    assert response.json() == {"error": "Description cannot be longer than 3 characters"}

    response = client.patch(f"/tickets/{created['id']}", json={"description": "abc"})
    assert response.status_code == 200


# =============================================================================
# startup
# =============================================================================

def test_startup_logs_endpoints_and_status_labels(caplog):
    caplog.set_level(logging.INFO, logger="app.main")

    with TestClient(app):
        pass

    assert "Starting Ticket API..." in caplog.text
    assert "/tickets/{id}" in caplog.text
    assert "Ticket statuses: ToDo (To Do), InProgress (In Progress), Done (Done)" in caplog.text
    assert "Shutting down Ticket API..." in caplog.text
