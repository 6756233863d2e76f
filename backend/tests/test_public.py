from datetime import datetime, timedelta, timezone

from app.models.experience import Experience
from app.models.post import DRAFT, PUBLISHED, SCHEDULED, Post
from app.models.promo_section import PromoSection
from app.models.tool import Tool


def _post(db, slug, status, published_at=None, **extra):
    post = Post(slug=slug, title=slug, status=status, published=status == PUBLISHED, published_at=published_at, **extra)
    db.add(post)
    db.commit()
    return post


def test_public_posts_only_lists_live_posts(client, db):
    now = datetime.now(timezone.utc)
    _post(db, "older", PUBLISHED, now - timedelta(days=2))
    _post(db, "newer", PUBLISHED, now - timedelta(days=1))
    _post(db, "future", PUBLISHED, now + timedelta(days=1))
    _post(db, "draft", DRAFT)
    _post(db, "scheduled", SCHEDULED, scheduled_at=now + timedelta(days=1))

    resp = client.get("/api/posts")
    assert resp.status_code == 200
    assert [post["slug"] for post in resp.json()] == ["newer", "older"]


def test_public_post_by_slug(client, db, admin_headers):
    _post(db, "live", PUBLISHED, datetime.now(timezone.utc) - timedelta(hours=1))
    _post(db, "hidden", DRAFT)

    assert client.get("/api/posts/live").json()["slug"] == "live"
    resp = client.get("/api/posts/hidden")
    assert resp.status_code == 404
    assert resp.json() == {"ok": False, "message": "Post not found"}

    resp = client.get("/api/posts/hidden", headers=admin_headers)
    assert resp.status_code == 200


def _experience(db, company, start, **extra):
    row = Experience(company=company, title="Engineer", start_date=start, **extra)
    db.add(row)
    db.commit()
    return row


def test_experience_summary_truncates(client, db):
    _experience(db, "Acme", datetime(2020, 1, 1, tzinfo=timezone.utc), description="x" * 250)
    _experience(db, "Hidden", datetime(2022, 1, 1, tzinfo=timezone.utc), published=False)
    _experience(db, "Globex", datetime(2021, 1, 1, tzinfo=timezone.utc), full_description="Short")

    resp = client.get("/api/experiences/summary")
    data = resp.json()
    assert [row["company"] for row in data] == ["Globex", "Acme"]
    assert set(data[0]) == {"id", "title", "company", "period", "location", "description"}
    assert data[0]["description"] == "Short"
    assert len(data[1]["description"]) == 200
    assert data[1]["description"].endswith("…")

    assert [row["company"] for row in client.get("/api/experiences").json()] == ["Globex", "Acme"]


def test_public_skills_are_aggregated(client, db):
    start = datetime(2020, 1, 1, tzinfo=timezone.utc)
    _experience(db, "A", start, skills=["Python", "SQL"])
    _experience(db, "B", start, skills=["python", "Go"])

    resp = client.get("/api/skills")
    assert resp.json() == [
        {"name": "Python", "slug": "python", "frequency": 2},
        {"name": "Go", "slug": "go", "frequency": 1},
        {"name": "SQL", "slug": "sql", "frequency": 1},
    ]


def test_active_promos_grouped_by_placement(client, db):
    db.add_all([
        PromoSection(title="Top", placement="TOP_BAR", is_enabled=True),
        PromoSection(title="Off", placement="TOP_BAR", is_enabled=False),
        PromoSection(title="Card", placement="PRE_FOOTER_CARD", is_enabled=True),
    ])
    db.commit()

    data = client.get("/api/promos/active").json()
    assert [row["title"] for row in data["TOP_BAR"]] == ["Top"]
    assert data["BOTTOM_BAR"] == []
    assert [row["title"] for row in data["PRE_FOOTER_CARD"]] == ["Card"]


def test_public_tools_hide_unpublished(client, db):
    db.add_all([Tool(name="Shown"), Tool(name="Hidden", published=False)])
    db.commit()
    assert [row["name"] for row in client.get("/api/tools").json()] == ["Shown"]
