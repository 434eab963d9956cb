"""
Tests for the confirmation and event API routes
"""

import io

import pandas as pd
from sqlalchemy.exc import OperationalError

from app.services.repositories import EventRepo

def create_event(admin_client, event_id="birthday", name="Birthday Party", date="Saturday 8pm"):
    response = admin_client.post("/api/events", json={"eventId": event_id, "name": name, "date": date})
    assert response.status_code == 201
    return response.json()

def confirm(client, event_id="birthday", name="Maria", guests=3):
    return client.post("/api/confirm", json={"eventId": event_id, "name": name, "guests": guests})

# -------- Events --------

def test_create_event(admin_client):
    body = create_event(admin_client)

    assert body["eventId"] == "birthday"
    assert body["event"] == {"name": "Birthday Party", "date": "Saturday 8pm"}
    assert body["message"]

def test_create_event_invalid_id(admin_client):
    response = admin_client.post("/api/events", json={"eventId": "Birthday Party", "name": "x", "date": "y"})

    assert response.status_code == 400
    assert "lowercase" in response.json()["message"]
    assert admin_client.get("/api/confirm").json() == []

def test_create_event_padded_id_rejected(admin_client):
    response = admin_client.post("/api/events", json={"eventId": " gala ", "name": "Gala", "date": "Dec 1"})

    assert response.status_code == 400
    assert admin_client.get("/api/confirm").json() == []

def test_create_event_duplicate_conflicts(admin_client):
    create_event(admin_client)

    response = admin_client.post("/api/events", json={"eventId": "birthday", "name": "Other", "date": "Sunday"})

    assert response.status_code == 409
    assert admin_client.get("/api/confirm?eventId=birthday").json()["details"]["name"] == "Birthday Party"

def test_create_event_requires_admin(client):
    response = client.post("/api/events", json={"eventId": "birthday", "name": "x", "date": "y"})

    assert response.status_code == 401
    assert response.json()["message"]

def test_list_events(admin_client):
    create_event(admin_client, "first", "First", "Jan")
    create_event(admin_client, "second", "Second", "Feb")

    response = admin_client.get("/api/confirm")

    assert response.status_code == 200
    events = response.json()
    assert {e["id"] for e in events} == {"first", "second"}
    assert set(events[0].keys()) == {"id", "name", "date"}

def test_list_events_requires_admin(client):
    assert client.get("/api/confirm").status_code == 401

def test_delete_event(admin_client):
    create_event(admin_client)
    confirm(admin_client)

    response = admin_client.delete("/api/events?eventId=birthday")

    assert response.status_code == 200
    assert admin_client.get("/api/confirm").json() == []
    assert admin_client.get("/api/confirm?eventId=birthday").status_code == 404

def test_delete_event_missing_id(admin_client):
    response = admin_client.delete("/api/events")

    assert response.status_code == 400

def test_delete_unknown_event(admin_client):
    response = admin_client.delete("/api/events?eventId=nope")

    assert response.status_code == 404
    assert "nope" in response.json()["message"]

# -------- Confirmations --------

def test_public_confirmation_flow(client, admin_client):
    create_event(admin_client)
    admin_client.cookies.clear()

    response = confirm(client, guests="3")

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["name"] == "Maria"
    assert data["guests"] == 3
    assert data["id"]
    assert data["confirmed_at"]

def test_public_event_details_hide_confirmations(client, admin_client):
    create_event(admin_client)
    confirm(admin_client)
    admin_client.cookies.clear()

    response = client.get("/api/confirm?eventId=birthday")

    assert response.status_code == 200
    assert response.json() == {"details": {"name": "Birthday Party", "date": "Saturday 8pm"}}

def test_admin_event_details_include_confirmations(admin_client):
    create_event(admin_client)
    confirm(admin_client, name="Maria", guests=3)
    confirm(admin_client, name="João", guests=2)

    response = admin_client.get("/api/confirm?eventId=birthday")

    assert response.status_code == 200
    body = response.json()
    assert body["details"] == {"name": "Birthday Party", "date": "Saturday 8pm"}
    assert {c["name"] for c in body["confirmations"]} == {"Maria", "João"}
    assert body["total_guests"] == 5

def test_event_details_unknown_event(client):
    response = client.get("/api/confirm?eventId=missing")

    assert response.status_code == 404

def test_confirmation_unknown_event(client):
    response = confirm(client, event_id="missing")

    assert response.status_code == 404

def test_confirmation_invalid_guests(admin_client):
    create_event(admin_client)

    for guests in (0, -1, "abc", None, 10**20, "9" * 5000):
        response = confirm(admin_client, guests=guests)
        assert response.status_code == 400
        assert "guests" in response.json()["message"]

    assert admin_client.get("/api/confirm?eventId=birthday").json()["confirmations"] == []

def test_confirmation_missing_name(admin_client):
    create_event(admin_client)

    response = admin_client.post("/api/confirm", json={"eventId": "birthday", "guests": 1})

    assert response.status_code == 400

def test_malformed_json_body(client):
    response = client.post(
        "/api/confirm",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Malformed JSON in request body."

def test_update_confirmation(admin_client):
    create_event(admin_client)
    created = confirm(admin_client).json()["data"]

    response = admin_client.put(
        f"/api/confirm?eventId=birthday&id={created['id']}",
        json={"name": "Maria Souza", "guests": 4},
    )

    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["name"] == "Maria Souza"
    assert updated["guests"] == 4
    assert updated["confirmed_at"] == created["confirmed_at"]

def test_update_confirmation_requires_admin(client, admin_client):
    create_event(admin_client)
    created = confirm(admin_client).json()["data"]
    admin_client.cookies.clear()

    response = client.put(
        f"/api/confirm?eventId=birthday&id={created['id']}",
        json={"name": "Someone", "guests": 1},
    )

    assert response.status_code == 401

def test_update_confirmation_invalid_id(admin_client):
    create_event(admin_client)

    response = admin_client.put("/api/confirm?eventId=birthday&id=123", json={"name": "X", "guests": 1})

    assert response.status_code == 400

def test_update_confirmation_other_event_not_found(admin_client):
    create_event(admin_client, "event-a", "A", "Mon")
    create_event(admin_client, "event-b", "B", "Tue")
    other = confirm(admin_client, event_id="event-b", name="Bruno", guests=1).json()["data"]

    response = admin_client.put(
        f"/api/confirm?eventId=event-a&id={other['id']}",
        json={"name": "Changed", "guests": 5},
    )

    assert response.status_code == 404
    confirmations = admin_client.get("/api/confirm?eventId=event-b").json()["confirmations"]
    assert confirmations[0]["name"] == "Bruno"
    assert confirmations[0]["guests"] == 1

def test_delete_confirmation(admin_client):
    create_event(admin_client)
    created = confirm(admin_client).json()["data"]

    response = admin_client.delete(f"/api/confirm?eventId=birthday&id={created['id']}")

    assert response.status_code == 200
    assert admin_client.get("/api/confirm?eventId=birthday").json()["confirmations"] == []

    again = admin_client.delete(f"/api/confirm?eventId=birthday&id={created['id']}")
    assert again.status_code == 404

def test_delete_confirmation_missing_params(admin_client):
    assert admin_client.delete("/api/confirm?eventId=birthday").status_code == 400
    assert admin_client.delete("/api/confirm").status_code == 400

def test_delete_confirmation_other_event_not_found(admin_client):
    create_event(admin_client, "event-a", "A", "Mon")
    create_event(admin_client, "event-b", "B", "Tue")
    other = confirm(admin_client, event_id="event-b").json()["data"]

    response = admin_client.delete(f"/api/confirm?eventId=event-a&id={other['id']}")

    assert response.status_code == 404
    assert len(admin_client.get("/api/confirm?eventId=event-b").json()["confirmations"]) == 1

def test_storage_failure_is_generic(admin_client, monkeypatch):
    def broken(db):
        raise OperationalError("SELECT secret_table", {}, Exception("disk I/O error"))

    monkeypatch.setattr(EventRepo, "list_all", staticmethod(broken))

    response = admin_client.get("/api/confirm")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error."}

# -------- Sharing & export --------

def test_export_confirmations(admin_client):
    create_event(admin_client)
    confirm(admin_client, name="Maria", guests=3)
    confirm(admin_client, name="Pedro", guests=1)

    response = admin_client.get("/api/events/birthday/export.xlsx")

    assert response.status_code == 200
    assert "spreadsheetml" in response.headers["content-type"]
    df = pd.read_excel(io.BytesIO(response.content))
    assert list(df.columns) == ["Name", "Guests", "Confirmed At"]
    assert set(df["Name"]) == {"Maria", "Pedro", "Total"}
    assert df[df["Name"] == "Total"]["Guests"].iloc[0] == 4

def test_export_requires_admin(client):
    assert client.get("/api/events/birthday/export.xlsx").status_code == 401

def test_export_unknown_event(admin_client):
    assert admin_client.get("/api/events/missing/export.xlsx").status_code == 404

def test_event_qr_code(admin_client):
    create_event(admin_client)

    response = admin_client.get("/events/birthday/qr.png")

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(b"\x89PNG")

def test_event_qr_code_unknown_event(client):
    assert client.get("/events/missing/qr.png").status_code == 404

def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
