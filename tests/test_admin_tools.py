"""Dashboard, image uploads and data export/import."""
import pytest

from portfolio_api.core.dependencies import get_upload_service
from portfolio_api.core.exceptions import BadRequestException
from portfolio_api.main import app
from portfolio_api.services.upload_service import UploadService

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def _submit(client, name):
    return client.post("/contact", json={"name": name, "email": "jane@example.com", "message": "Hello"})


def test_admin_routes_require_token(client):
    assert client.get("/admin/dashboard").status_code == 401
    assert client.get("/admin/export").status_code == 401
    assert client.post("/admin/upload").status_code == 401


def test_dashboard_summary(client, auth_headers):
    first = _submit(client, "First").json()["data"]["id"]
    _submit(client, "Second")
    client.put(f"/contact/{first}/status", headers=auth_headers, json={"status": "read"})
    client.post(
        "/portfolio/projects",
        headers=auth_headers,
        json={"title": "API", "description": "Service"},
    )

    r = client.get("/admin/dashboard", headers=auth_headers)
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["contact_stats"] == {"total": 2, "unread": 1, "read": 1, "replied": 0}
    assert data["recent_activity"] == 2
    assert {m["name"] for m in data["recent_contacts"]} == {"First", "Second"}
    assert "ip_address" not in data["recent_contacts"][0]
    assert data["portfolio"]["projects_count"] == 1
    assert data["portfolio"]["skills_count"] == 4
    assert data["portfolio"]["last_updated"]


def test_upload_list_and_delete(client, auth_headers, upload_dir):
    r = client.post(
        "/admin/upload",
        headers=auth_headers,
        files={"image": ("photo.PNG", PNG, "image/png")},
    )
    assert r.status_code == 201
    data = r.json()["data"]
    assert data["filename"].startswith("image-")
    assert data["filename"].endswith(".png")
    assert data["original_name"] == "photo.PNG"
    assert data["size"] == len(PNG)
    assert data["url"].endswith(f"/uploads/{data['filename']}")
    assert (upload_dir / data["filename"]).read_bytes() == PNG

    files = client.get("/admin/uploads", headers=auth_headers).json()["data"]
    assert [f["name"] for f in files] == [data["filename"]]

    r = client.delete(f"/admin/upload/{data['filename']}", headers=auth_headers)
    assert r.status_code == 200
    assert not (upload_dir / data["filename"]).exists()
    assert client.delete(f"/admin/upload/{data['filename']}", headers=auth_headers).status_code == 404


def test_upload_rejects_non_images(client, auth_headers, upload_dir):
    r = client.post(
        "/admin/upload",
        headers=auth_headers,
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )
    assert r.status_code == 400
    assert r.json()["error"] == "Only image files are allowed!"
    assert not upload_dir.exists()


def test_upload_size_limit(tmp_path):
    service = UploadService(upload_dir=str(tmp_path), max_size=10)
    with pytest.raises(BadRequestException):
        service.save_image("big.png", "image/png", PNG)


def test_upload_route_rejects_oversized_file(client, auth_headers, upload_dir):
    app.dependency_overrides[get_upload_service] = lambda: UploadService(upload_dir=str(upload_dir), max_size=16)
    r = client.post(
        "/admin/upload",
        headers=auth_headers,
        files={"image": ("big.png", PNG, "image/png")},
    )
    assert r.status_code == 400
    assert r.json()["error"].startswith("File too large")
    assert not upload_dir.exists()


def test_upload_delete_rejects_traversal(tmp_path):
    service = UploadService(upload_dir=str(tmp_path / "uploads"), max_size=1024)
    (tmp_path / "secret.txt").write_text("keep")
    with pytest.raises(BadRequestException):
        service.delete_file("../secret.txt")
    assert (tmp_path / "secret.txt").exists()


def test_list_uploads_when_empty(client, auth_headers):
    r = client.get("/admin/uploads", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["data"] == []


def test_export_then_import_restores_data(client, auth_headers):
    _submit(client, "Kept")
    client.put(
        "/portfolio/hero",
        headers=auth_headers,
        json={"title": "Exported", "subtitle": "Sub", "description": "Desc"},
    )

    r = client.get("/admin/export", headers=auth_headers)
    assert r.status_code == 200
    assert "attachment" in r.headers["content-disposition"]
    exported = r.json()
    assert exported["total_contacts"] == 1
    assert exported["portfolio"]["hero"]["title"] == "Exported"

    # wipe what was exported
    message_id = exported["contacts"][0]["id"]
    client.delete(f"/contact/{message_id}", headers=auth_headers)
    client.put("/portfolio/hero", headers=auth_headers, json={"title": "Changed", "subtitle": "S", "description": "D"})

    r = client.post("/admin/import", headers=auth_headers, json=exported)
    assert r.status_code == 200
    assert r.json()["data"] == {"portfolio_imported": True, "contacts_imported": 1}

    contacts = client.get("/contact", headers=auth_headers).json()["data"]
    assert [(c["id"], c["name"]) for c in contacts] == [(message_id, "Kept")]
    assert client.get("/portfolio").json()["data"]["hero"]["title"] == "Exported"


def test_import_invalid_contact_writes_nothing(client, auth_headers):
    _submit(client, "Existing")

    r = client.post(
        "/admin/import",
        headers=auth_headers,
        json={
            "portfolio": {"hero": {"title": "Imported", "subtitle": "S", "description": "D"}},
            "contacts": [{"name": "Bad", "email": "not-an-email", "message": "x"}],
        },
    )
    assert r.status_code == 400
    assert r.json()["errors"][0].startswith("contacts[0].email")

    contacts = client.get("/contact", headers=auth_headers).json()["data"]
    assert [c["name"] for c in contacts] == ["Existing"]
    assert client.get("/portfolio").json()["data"]["hero"]["title"] != "Imported"


def test_import_repeated_contact_id_writes_nothing(client, auth_headers):
    _submit(client, "Existing")
    before_hero = client.get("/portfolio").json()["data"]["hero"]
    shared_id = "65f000000000000000000001"

    r = client.post(
        "/admin/import",
        headers=auth_headers,
        json={
            "portfolio": {"hero": {"title": "Imported", "subtitle": "S", "description": "D"}},
            "contacts": [
                {"id": shared_id, "name": "A", "email": "a@example.com", "message": "x"},
                {"id": shared_id, "name": "B", "email": "b@example.com", "message": "y"},
            ],
        },
    )
    assert r.status_code == 400
    assert r.json()["error"] == "Duplicate contact id in import"
    assert r.json()["errors"] == ["contacts[1].id: duplicate"]

    contacts = client.get("/contact", headers=auth_headers).json()["data"]
    assert [c["name"] for c in contacts] == ["Existing"]
    assert client.get("/portfolio").json()["data"]["hero"] == before_hero


def test_import_nothing(client, auth_headers):
    r = client.post("/admin/import", headers=auth_headers, json={})
    assert r.status_code == 400
    assert r.json()["error"] == "Nothing to import"
