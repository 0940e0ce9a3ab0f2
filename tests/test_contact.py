"""Contact form submission and the admin inbox."""
from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from portfolio_api.main import app
from portfolio_api.repositories.mongo_contact_repository import MongoContactRepository
from portfolio_api.services.contact_service import ContactService

MESSAGE = {"name": "Jane Doe", "email": "jane@example.com", "message": "Are you available for a project?"}


def _submit(client, **overrides):
    return client.post("/contact", json={**MESSAGE, **overrides})


def test_submit_is_public_and_unread(client):
    r = _submit(client, name="  Jane Doe  ")
    assert r.status_code == 201
    data = r.json()["data"]
    assert data["status"] == "unread"
    assert data["name"] == "Jane Doe"
    assert data["id"]
    assert data["user_agent"]
    assert data["ip_address"]


def test_submit_ignores_forwarded_ip_from_untrusted_peer(client):
    r = client.post("/contact", json=MESSAGE, headers={"X-Forwarded-For": "203.0.113.7"})
    assert r.json()["data"]["ip_address"] == "testclient"


def test_submit_uses_forwarded_ip_behind_trusted_proxy(client):
    proxied = TestClient(ProxyHeadersMiddleware(app, trusted_hosts="testclient"))
    r = proxied.post("/contact", json=MESSAGE, headers={"X-Forwarded-For": "203.0.113.7"})
    assert r.status_code == 201
    assert r.json()["data"]["ip_address"] == "203.0.113.7"


def test_submit_validates_bounds(client, auth_headers):
    assert _submit(client, name="x" * 51).status_code == 400
    assert _submit(client, message="x" * 1001).status_code == 400
    r = _submit(client, email="nope")
    assert r.status_code == 400
    assert r.json()["error"] == "Validation failed"

    assert client.get("/contact", headers=auth_headers).json()["data"] == []


def test_inbox_requires_token(client):
    assert client.get("/contact").status_code == 401


def test_status_change_shows_in_list(client, auth_headers):
    message_id = _submit(client).json()["data"]["id"]

    r = client.put(f"/contact/{message_id}/status", headers=auth_headers, json={"status": "replied"})
    assert r.status_code == 200
    assert r.json()["data"]["status"] == "replied"

    listed = client.get("/contact", headers=auth_headers).json()["data"]
    assert [(m["id"], m["status"]) for m in listed] == [(message_id, "replied")]

    # any status may follow any other
    r = client.put(f"/contact/{message_id}/status", headers=auth_headers, json={"status": "unread"})
    assert r.json()["data"]["status"] == "unread"


def test_list_filters_by_status(client, auth_headers):
    first = _submit(client, name="First").json()["data"]["id"]
    _submit(client, name="Second")
    client.put(f"/contact/{first}/status", headers=auth_headers, json={"status": "read"})

    read = client.get("/contact", headers=auth_headers, params={"status": "read"}).json()["data"]
    assert [m["name"] for m in read] == ["First"]
    unread = client.get("/contact", headers=auth_headers, params={"status": "unread"}).json()["data"]
    assert [m["name"] for m in unread] == ["Second"]
    assert client.get("/contact", headers=auth_headers, params={"status": "spam"}).status_code == 400


def test_invalid_status_rejected(client, auth_headers):
    message_id = _submit(client).json()["data"]["id"]
    r = client.put(f"/contact/{message_id}/status", headers=auth_headers, json={"status": "archived"})
    assert r.status_code == 400


def test_get_and_delete_message(client, auth_headers):
    message_id = _submit(client).json()["data"]["id"]

    r = client.get(f"/contact/{message_id}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["data"]["email"] == "jane@example.com"

    assert client.delete(f"/contact/{message_id}", headers=auth_headers).status_code == 200
    r = client.get(f"/contact/{message_id}", headers=auth_headers)
    assert r.status_code == 404
    assert r.json()["error"] == "Message not found"
    assert client.put(
        f"/contact/{message_id}/status", headers=auth_headers, json={"status": "read"}
    ).status_code == 404


def test_notifier_called_with_new_message(db):
    notifier = MagicMock(return_value=True)
    service = ContactService(contact_repository=MongoContactRepository(db), notifier=notifier)

    created = service.submit("Jane", "jane@example.com", "Hello")
    notifier.assert_called_once_with(created)


def test_count_by_status_is_zero_filled(db):
    service = ContactService(contact_repository=MongoContactRepository(db), notifier=None)
    assert service.count_by_status() == {"total": 0, "unread": 0, "read": 0, "replied": 0}

    message = service.submit("Jane", "jane@example.com", "Hello")
    service.submit("John", "john@example.com", "Hi")
    service.set_status(str(message["_id"]), "replied")
    assert service.count_by_status() == {"total": 2, "unread": 1, "read": 0, "replied": 1}
    assert service.count_since(7) == 2
