"""Portfolio document: find-or-create, section replacement and embedded collections."""
import pytest
from pymongo.errors import DuplicateKeyError

from portfolio_api.core.exceptions import BadRequestException, NotFoundException
from portfolio_api.models.portfolio_model import PORTFOLIO_ID
from portfolio_api.repositories.mongo_portfolio_repository import MongoPortfolioRepository
from portfolio_api.services.portfolio_service import PortfolioService

HERO = {
    "title": "Backend Engineer",
    "subtitle": "APIs and data",
    "description": "I build services.",
    "cv_url": "https://example.com/cv.pdf",
    "social_links": {"github": "https://github.com/owner"},
}

PROJECT = {
    "title": "Inventory API",
    "description": "Stock tracking service",
    "technologies": "Python, FastAPI , MongoDB",
    "live_url": "https://example.com",
}


@pytest.fixture
def service(db):
    return PortfolioService(portfolio_repository=MongoPortfolioRepository(db))


def _projects(client):
    return client.get("/portfolio").json()["data"]["projects"]["items"]


def test_get_is_public_and_creates_defaults(client, db):
    r = client.get("/portfolio")
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["id"] == PORTFOLIO_ID
    assert set(data) >= {"hero", "about", "projects", "contact", "footer"}
    assert len(data["about"]["skills"]) == 4
    assert all(skill["id"] for skill in data["about"]["skills"])
    assert data["projects"]["items"] == []
    assert db["portfolio"].count_documents({}) == 1


def test_get_twice_returns_same_document(service, db):
    first = service.get()
    second = service.get()
    assert first == second
    assert db["portfolio"].count_documents({}) == 1


class RacingCollection:
    """Another request inserts the portfolio between our lookup and our upsert"""

    def __init__(self, collection):
        self.collection = collection

    def find_one_and_update(self, *args, **kwargs):
        self.collection.insert_one({"_id": PORTFOLIO_ID, "hero": {"title": "winner"}})
        raise DuplicateKeyError("E11000 duplicate key error")

    def find_one(self, *args, **kwargs):
        return self.collection.find_one(*args, **kwargs)


def test_racing_creation_reads_the_winner(db):
    repo = MongoPortfolioRepository(db)
    repo.collection = RacingCollection(db["portfolio"])

    document = repo.get_or_create({"hero": {"title": "loser"}})
    assert document["hero"]["title"] == "winner"
    assert db["portfolio"].count_documents({}) == 1


def test_section_update_requires_token(client):
    r = client.put("/portfolio/hero", json=HERO)
    assert r.status_code == 401


def test_replace_hero(client, auth_headers):
    r = client.put("/portfolio/hero", headers=auth_headers, json=HERO)
    assert r.status_code == 200
    assert r.json()["data"]["title"] == "Backend Engineer"

    hero = client.get("/portfolio").json()["data"]["hero"]
    assert hero["social_links"]["github"] == "https://github.com/owner"
    assert hero["social_links"]["linkedin"] == ""


def test_invalid_section_payload_writes_nothing(client, auth_headers):
    before = client.get("/portfolio").json()["data"]["hero"]

    r = client.put("/portfolio/hero", headers=auth_headers, json={"subtitle": "only this"})
    assert r.status_code == 400
    body = r.json()
    assert body["error"] == "Invalid hero section"
    assert any(e.startswith("title") for e in body["errors"])

    assert client.get("/portfolio").json()["data"]["hero"] == before


def test_unknown_section(client, auth_headers):
    r = client.put("/portfolio/blog", headers=auth_headers, json={"title": "x"})
    assert r.status_code == 400
    assert r.json()["error"] == "Unknown section 'blog'"


def test_about_without_skills_keeps_stored_skills(client, auth_headers):
    skills = client.get("/portfolio").json()["data"]["about"]["skills"]

    r = client.put(
        "/portfolio/about",
        headers=auth_headers,
        json={"title": "About", "subtitle": "Me", "description": "Short bio"},
    )
    assert r.status_code == 200
    about = client.get("/portfolio").json()["data"]["about"]
    assert about["description"] == "Short bio"
    assert about["skills"] == skills


def test_about_with_skills_replaces_them(client, auth_headers):
    r = client.put(
        "/portfolio/about",
        headers=auth_headers,
        json={
            "title": "About",
            "subtitle": "Me",
            "description": "Short bio",
            "skills": [{"icon": "Code", "title": "Python", "description": "Services"}],
        },
    )
    assert r.status_code == 200
    skills = client.get("/portfolio").json()["data"]["about"]["skills"]
    assert len(skills) == 1
    assert skills[0]["title"] == "Python"
    assert skills[0]["id"]


def test_section_with_repeated_item_id_rejected(client, auth_headers):
    shared_id = "65f000000000000000000001"
    r = client.put(
        "/portfolio/projects",
        headers=auth_headers,
        json={
            "title": "Work",
            "subtitle": "Selected",
            "items": [
                {**PROJECT, "id": shared_id, "title": "First"},
                {**PROJECT, "id": shared_id, "title": "Second"},
            ],
        },
    )
    assert r.status_code == 400
    assert r.json()["error"] == "Duplicate id in projects.items"
    assert r.json()["errors"] == ["projects.items[1].id: duplicate"]
    assert _projects(client) == []


def test_update_whole_portfolio(client, auth_headers):
    r = client.put(
        "/portfolio",
        headers=auth_headers,
        json={
            "id": "ignored",
            "hero": HERO,
            "footer": {"copyright": "2026 Owner", "additional_links": [{"text": "Blog", "url": "/blog"}]},
        },
    )
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["hero"]["title"] == "Backend Engineer"
    assert data["footer"]["additional_links"] == [{"text": "Blog", "url": "/blog"}]


def test_update_whole_portfolio_validates_every_section(client, auth_headers):
    before = client.get("/portfolio").json()["data"]
    r = client.put("/portfolio", headers=auth_headers, json={"hero": HERO, "contact": {"title": "x"}})
    assert r.status_code == 400
    assert client.get("/portfolio").json()["data"]["hero"] == before["hero"]


def test_add_then_delete_project_keeps_length(client, auth_headers):
    assert _projects(client) == []
    client.post("/portfolio/projects", headers=auth_headers, json={**PROJECT, "title": "First"})
    length = len(_projects(client))

    r = client.post("/portfolio/projects", headers=auth_headers, json=PROJECT)
    assert r.status_code == 201
    project = r.json()["data"]
    assert project["technologies"] == ["Python", "FastAPI", "MongoDB"]
    assert project["order"] == 1
    assert project["featured"] is False
    assert len(_projects(client)) == length + 1

    r = client.delete(f"/portfolio/projects/{project['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert len(_projects(client)) == length
    assert _projects(client)[0]["title"] == "First"


def test_update_project_merges_fields(client, auth_headers):
    project = client.post("/portfolio/projects", headers=auth_headers, json=PROJECT).json()["data"]

    r = client.put(
        f"/portfolio/projects/{project['id']}",
        headers=auth_headers,
        json={"featured": True, "technologies": "Go"},
    )
    assert r.status_code == 200
    updated = r.json()["data"]
    assert updated["id"] == project["id"]
    assert updated["featured"] is True
    assert updated["technologies"] == ["Go"]
    assert updated["title"] == PROJECT["title"]


def test_project_unknown_id(client, auth_headers):
    missing = "64b000000000000000000000"
    r = client.put(f"/portfolio/projects/{missing}", headers=auth_headers, json={"title": "x"})
    assert r.status_code == 404
    assert r.json()["error"] == "Project not found"
    assert client.delete(f"/portfolio/projects/{missing}", headers=auth_headers).status_code == 404
    assert client.delete("/portfolio/projects/not-an-id", headers=auth_headers).status_code == 404


def test_project_requires_title(client, auth_headers):
    r = client.post("/portfolio/projects", headers=auth_headers, json={"description": "no title"})
    assert r.status_code == 400
    assert _projects(client) == []


def test_skill_lifecycle(client, auth_headers):
    r = client.post(
        "/portfolio/skills",
        headers=auth_headers,
        json={"icon": "Cloud", "title": "DevOps", "description": "Docker, CI"},
    )
    assert r.status_code == 201
    skill_id = r.json()["data"]["id"]

    r = client.put(f"/portfolio/skills/{skill_id}", headers=auth_headers, json={"description": "Kubernetes"})
    assert r.status_code == 200
    assert r.json()["data"]["description"] == "Kubernetes"

    skills = client.get("/portfolio").json()["data"]["about"]["skills"]
    assert len(skills) == 5
    assert skills[-1]["title"] == "DevOps"

    assert client.delete(f"/portfolio/skills/{skill_id}", headers=auth_headers).status_code == 200
    assert len(client.get("/portfolio").json()["data"]["about"]["skills"]) == 4


def test_update_item_only_touches_target(client, auth_headers):
    skills = client.get("/portfolio").json()["data"]["about"]["skills"]
    target = skills[2]

    r = client.put(f"/portfolio/skills/{target['id']}", headers=auth_headers, json={"title": "Renamed"})
    assert r.status_code == 200

    after = client.get("/portfolio").json()["data"]["about"]["skills"]
    assert [s["title"] for s in after] == [
        s["title"] if s["id"] != target["id"] else "Renamed" for s in skills
    ]


def test_contact_info_lifecycle(client, auth_headers):
    info = client.get("/portfolio").json()["data"]["contact"]["contact_info"]
    assert len(info) == 3

    r = client.put(
        f"/portfolio/contact-info/{info[0]['id']}",
        headers=auth_headers,
        json={"value": "owner@example.com", "href": "mailto:owner@example.com"},
    )
    assert r.status_code == 200
    assert r.json()["data"]["value"] == "owner@example.com"

    r = client.delete(f"/portfolio/contact-info/{info[1]['id']}", headers=auth_headers)
    assert r.status_code == 200
    remaining = client.get("/portfolio").json()["data"]["contact"]["contact_info"]
    assert [i["id"] for i in remaining] == [info[0]["id"], info[2]["id"]]


def test_update_item_without_fields(service):
    skill_id = str(service.get()["about"]["skills"][0]["_id"])
    with pytest.raises(BadRequestException):
        service.update_item("skills", skill_id, {"id": skill_id})


def test_delete_unknown_contact_info(service):
    with pytest.raises(NotFoundException):
        service.delete_item("contact-info", "64b000000000000000000000")
