from app.models.audit_entry import AuditEntry
from app.models.experience import Experience
from app.models.promo_section import PromoSection
from app.models.skill import Skill
from app.models.work_sample import WorkSample

EXPERIENCE = {
    "company": "Acme",
    "title": "Engineer",
    "startDate": "2020-01-01",
    "achievements": "Shipped v1\nHired team",
    "skills": ["Python", "SQL"],
    "careerProgression": '[{"title": "Junior", "period": "2020"}]',
    "previousRole": {"title": "Intern", "period": "2019"},
}


def _audits(db, entity_type, action=None):
    query = db.query(AuditEntry).filter(AuditEntry.entity_type == entity_type)
    if action:
        query = query.filter(AuditEntry.action == action)
    return query.count()


def test_experience_lifecycle(client, db, admin_headers):
    resp = client.post("/api/admin/experiences", json=EXPERIENCE, headers=admin_headers)
    assert resp.status_code == 200, resp.text
    created = resp.json()["data"]
    assert created["achievements"] == ["Shipped v1", "Hired team"]
    assert created["career_progression"][0]["title"] == "Junior"
    assert created["previous_role"] == {"title": "Intern", "period": "2019"}
    assert created["published"] is True

    resp = client.put(
        f"/api/admin/experiences/{created['id']}",
        json={**EXPERIENCE, "company": "Acme Inc"},
        headers=admin_headers,
    )
    assert resp.json()["data"]["company"] == "Acme Inc"

    resp = client.post(f"/api/admin/experiences/{created['id']}/duplicate", headers=admin_headers)
    copy = resp.json()["data"]
    assert copy["company"] == "Acme Inc (Copy)"
    assert copy["published"] is False

    resp = client.post(f"/api/admin/experiences/{created['id']}/published", headers=admin_headers)
    assert resp.json()["data"]["published"] is False

    resp = client.post(
        "/api/admin/experiences/bulk-delete",
        json={"ids": [created["id"], copy["id"]]},
        headers=admin_headers,
    )
    assert resp.json()["data"] == {"count": 2}
    assert db.query(Experience).count() == 0
    assert _audits(db, "Experience", "CREATE") == 2
    assert _audits(db, "Experience", "UPDATE") == 2
    assert _audits(db, "Experience", "DELETE") == 2


def test_experience_validation_messages(client, admin_headers):
    resp = client.post("/api/admin/experiences", json={**EXPERIENCE, "company": " "}, headers=admin_headers)
    assert resp.json()["message"] == "Company is required"

    resp = client.post("/api/admin/experiences", json={**EXPERIENCE, "startDate": "soon"}, headers=admin_headers)
    assert resp.json()["message"] == "Enter a valid date"

    resp = client.post(
        "/api/admin/experiences",
        json={**EXPERIENCE, "careerProgression": '{"title": "x"}'},
        headers=admin_headers,
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "Career progression must be a JSON array"


def test_experience_not_found(client, admin_headers):
    resp = client.delete("/api/admin/experiences/404", headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json()["message"] == "Experience not found"


def test_web_app_lifecycle(client, db, admin_headers):
    resp = client.post(
        "/api/admin/apps",
        json={"name": "Tracker", "url": "https://tracker.example.com", "blogPostSlug": "tracker"},
        headers=admin_headers,
    )
    app_data = resp.json()["data"]
    assert app_data["blog_post_slug"] == "tracker"

    resp = client.post("/api/admin/apps", json={"name": "Bad", "url": "not a url"}, headers=admin_headers)
    assert resp.json() == {"ok": False, "message": "Enter a valid URL"}

    resp = client.post(f"/api/admin/apps/{app_data['id']}/duplicate", headers=admin_headers)
    assert resp.json()["data"]["name"] == "Tracker (Copy)"

    resp = client.delete(f"/api/admin/apps/{app_data['id']}", headers=admin_headers)
    assert resp.json()["data"] == {"id": app_data["id"]}

    resp = client.put("/api/admin/apps/999", json={"name": "Ghost"}, headers=admin_headers)
    assert resp.json()["message"] == "App not found"
    assert _audits(db, "WebApp") == 3


def test_work_sample_duplicate_starts_unpublished(client, db, admin_headers):
    resp = client.post("/api/admin/worksamples", json={"title": "Audit"}, headers=admin_headers)
    sample = resp.json()["data"]
    assert sample["published"] is True

    resp = client.post(f"/api/admin/worksamples/{sample['id']}/duplicate", headers=admin_headers)
    assert resp.json()["data"]["published"] is False

    resp = client.put(
        f"/api/admin/worksamples/{sample['id']}",
        json={"title": "Audit v2", "description": "  "},
        headers=admin_headers,
    )
    updated = resp.json()["data"]
    assert updated["published"] is True
    assert updated["description"] is None

    resp = client.post(
        f"/api/admin/worksamples/{sample['id']}/published",
        json={"published": False},
        headers=admin_headers,
    )
    assert resp.json()["data"]["published"] is False
    assert db.query(WorkSample).filter(WorkSample.published == True).count() == 0


def test_skill_slug_and_level(client, db, admin_headers):
    resp = client.post(
        "/api/admin/skills",
        json={"name": "C++ & Rust", "level": 9},
        headers=admin_headers,
    )
    skill = resp.json()["data"]
    assert skill["slug"] == "c-rust"
    assert skill["level"] == 5

    resp = client.post("/api/admin/skills", json={"name": "c rust"}, headers=admin_headers)
    assert resp.json()["message"] == "Slug already exists"

    resp = client.post("/api/admin/skills", json={"name": "!!!"}, headers=admin_headers)
    assert resp.json()["message"] == "Slug could not be generated"

    resp = client.post(f"/api/admin/skills/{skill['id']}/duplicate", headers=admin_headers)
    copy = resp.json()["data"]
    assert copy["slug"] == "c-rust-copy"
    assert copy["name"] == "C++ & Rust (Copy)"
    assert db.query(Skill).count() == 2


def test_tool_crud(client, admin_headers):
    resp = client.post("/api/admin/tools", json={"name": "Linear"}, headers=admin_headers)
    tool = resp.json()["data"]
    resp = client.put(f"/api/admin/tools/{tool['id']}", json={"name": "Linear.app"}, headers=admin_headers)
    assert resp.json()["data"]["name"] == "Linear.app"
    resp = client.get("/api/admin/tools", headers=admin_headers)
    assert [row["name"] for row in resp.json()["data"]] == ["Linear.app"]


def test_promo_validation_and_duplicate(client, db, admin_headers):
    resp = client.post("/api/admin/promos", json={"title": "Hi", "placement": "SIDEBAR"}, headers=admin_headers)
    assert resp.json()["message"].startswith("Placement must be one of")

    resp = client.post(
        "/api/admin/promos",
        json={"title": "Hi", "placement": "top_bar", "displayOrder": "-4", "isEnabled": True},
        headers=admin_headers,
    )
    promo = resp.json()["data"]
    assert promo["placement"] == "TOP_BAR"
    assert promo["display_order"] == 0
    assert promo["is_enabled"] is True

    resp = client.post(f"/api/admin/promos/{promo['id']}/duplicate", headers=admin_headers)
    copy = resp.json()["data"]
    assert copy["title"] == "Hi (Copy)"
    assert copy["is_enabled"] is False
    assert db.query(PromoSection).count() == 2
