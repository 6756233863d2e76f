from datetime import datetime, timedelta, timezone

from app.models.audit_entry import AuditEntry
from app.models.post import DRAFT, PUBLISHED, SCHEDULED, Post
from app.services.revalidation import recent_paths


def _make_post(db, slug, status=DRAFT, **extra):
    post = Post(slug=slug, title=slug.title(), status=status, published=status == PUBLISHED, **extra)
    if status == PUBLISHED and "published_at" not in extra:
        post.published_at = datetime.now(timezone.utc) - timedelta(days=1)
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def _audit_count(db, action=None):
    query = db.query(AuditEntry).filter(AuditEntry.entity_type == "Post")
    if action:
        query = query.filter(AuditEntry.action == action)
    return query.count()


def test_create_post(client, db, admin_headers):
    resp = client.post(
        "/api/admin/posts",
        json={"slug": "hello", "title": "Hello", "status": "published", "metaDescription": "Intro"},
        headers=admin_headers,
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["ok"] is True
    post = body["data"]
    assert post["status"] == "published"
    assert post["published"] is True
    assert post["meta_description"] == "Intro"
    assert post["status_changed_by"] == "admin@example.com"

    entry = db.query(AuditEntry).one()
    assert entry.entity_id == "hello"
    assert entry.action == "CREATE"
    assert set(recent_paths()) >= {"/admin/posts", "/", "/blog"}


def test_create_post_reports_first_validation_error(client, admin_headers):
    resp = client.post("/api/admin/posts", json={"slug": "Bad Slug", "title": ""}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json() == {"ok": False, "message": "Use letters, numbers, and hyphens only."}

    resp = client.post("/api/admin/posts", json={"title": "No slug"}, headers=admin_headers)
    assert resp.json()["message"] == "Slug is required"


def test_create_scheduled_post_requires_timezone(client, admin_headers):
    resp = client.post(
        "/api/admin/posts",
        json={"slug": "later", "title": "Later", "status": "scheduled", "scheduledAt": "2999-01-01T10:00"},
        headers=admin_headers,
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "Datetime values must include a timezone offset."


def test_create_scheduled_post_in_past_is_rejected(client, admin_headers):
    resp = client.post(
        "/api/admin/posts",
        json={"slug": "past", "title": "Past", "status": "scheduled", "scheduledAt": "2001-01-01T10:00:00Z"},
        headers=admin_headers,
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "Scheduled posts must be set in the future."


def test_create_post_duplicate_slug(client, db, admin_headers):
    _make_post(db, "taken")
    resp = client.post("/api/admin/posts", json={"slug": "taken", "title": "Again"}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Slug already exists"


def test_create_requires_admin(client):
    resp = client.post("/api/admin/posts", json={"slug": "x", "title": "X"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "You are not authorised to perform this action."


def test_update_post_keeps_change_tracking_when_state_unchanged(client, db, admin_headers):
    post = _make_post(db, "steady", status=PUBLISHED, status_changed_by="seed")
    resp = client.put(
        f"/api/admin/posts/{post.id}",
        json={"slug": "steady", "title": "Steady edit", "status": "published"},
        headers=admin_headers,
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["title"] == "Steady edit"
    assert data["status_changed_by"] == "seed"

    entry = db.query(AuditEntry).filter(AuditEntry.action == "UPDATE").one()
    assert entry.entity_id == "steady"


def test_update_post_not_found(client, admin_headers):
    resp = client.put("/api/admin/posts/999", json={"slug": "x", "title": "X"}, headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json() == {"ok": False, "message": "Post not found"}


def test_update_post_can_rename_slug(client, db, admin_headers):
    post = _make_post(db, "old-slug")
    resp = client.put(
        f"/api/admin/posts/{post.id}",
        json={"slug": "new-slug", "title": "Renamed"},
        headers=admin_headers,
    )
    assert resp.json()["data"]["slug"] == "new-slug"


def test_delete_post(client, db, admin_headers):
    post = _make_post(db, "bye", status=PUBLISHED)
    resp = client.delete(f"/api/admin/posts/{post.id}", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["slug"] == "bye"
    assert db.query(Post).count() == 0
    entry = db.query(AuditEntry).one()
    assert entry.action == "DELETE"
    assert "/blog" in recent_paths()


def test_duplicate_post_picks_next_free_slug(client, db, admin_headers):
    post = _make_post(db, "original", status=PUBLISHED)
    _make_post(db, "original-copy")

    resp = client.post(f"/api/admin/posts/{post.id}/duplicate", headers=admin_headers)
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["slug"] == "original-copy-1"
    assert data["title"] == "Original (Copy)"
    assert data["status"] == "draft"
    assert data["published"] is False
    assert data["published_at"] is None

    entry = db.query(AuditEntry).one()
    assert entry.action == "CREATE"
    assert entry.entity_id == "original-copy-1"


def test_duplicate_title_is_truncated(client, db, admin_headers):
    post = _make_post(db, "long")
    post.title = "x" * 200
    db.commit()
    resp = client.post(f"/api/admin/posts/{post.id}/duplicate", headers=admin_headers)
    assert len(resp.json()["data"]["title"]) == 180


def test_bulk_publish_counts_only_changed_rows(client, db, admin_headers):
    ids = [_make_post(db, f"draft-{i}").id for i in range(3)]
    ids += [_make_post(db, f"live-{i}", status=PUBLISHED).id for i in range(2)]

    resp = client.post("/api/admin/posts/bulk-publish", json={"ids": ids}, headers=admin_headers)
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["count"] == 3
    assert {post["slug"] for post in data["posts"]} == {"draft-0", "draft-1", "draft-2"}
    assert _audit_count(db, "UPDATE") == 3
    assert db.query(Post).filter(Post.status == PUBLISHED).count() == 5


def test_bulk_unpublish(client, db, admin_headers):
    scheduled = _make_post(db, "soon", status=SCHEDULED, scheduled_at=datetime(2999, 1, 1, tzinfo=timezone.utc))
    live = _make_post(db, "live", status=PUBLISHED)
    draft = _make_post(db, "idle")

    resp = client.post(
        "/api/admin/posts/bulk-unpublish",
        json={"ids": [scheduled.id, live.id, draft.id]},
        headers=admin_headers,
    )
    data = resp.json()["data"]
    assert data["count"] == 2
    assert all(post["scheduled_at"] is None and post["published_at"] is None for post in data["posts"])
    assert _audit_count(db) == 2


def test_bulk_publish_empty_ids(client, admin_headers):
    resp = client.post("/api/admin/posts/bulk-publish", json={"ids": []}, headers=admin_headers)
    assert resp.json() == {"ok": True, "data": {"count": 0, "posts": []}}


def test_toggle_status_is_noop_when_already_draft(client, db, admin_headers):
    post = _make_post(db, "quiet")
    resp = client.post(f"/api/admin/posts/{post.id}/status", json={"target": "draft"}, headers=admin_headers)
    assert resp.status_code == 200
    assert _audit_count(db) == 0


def test_toggle_status_publishes(client, db, admin_headers):
    post = _make_post(db, "go-live")
    resp = client.post(f"/api/admin/posts/{post.id}/status", json={"target": "published"}, headers=admin_headers)
    data = resp.json()["data"]
    assert data["status"] == "published"
    assert data["published_at"] is not None
    assert _audit_count(db, "UPDATE") == 1


def test_toggle_status_rejects_unknown_target(client, db, admin_headers):
    post = _make_post(db, "odd")
    resp = client.post(f"/api/admin/posts/{post.id}/status", json={"target": "archived"}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Target must be published or draft"
    assert _audit_count(db, "UPDATE") == 0


def test_bulk_delete_posts(client, db, admin_headers):
    ids = [_make_post(db, f"gone-{i}").id for i in range(2)]
    resp = client.post("/api/admin/posts/bulk-delete", json={"ids": ids + [999]}, headers=admin_headers)
    assert resp.json()["data"] == {"count": 2}
    assert _audit_count(db, "DELETE") == 2


def test_bulk_create_skips_invalid_rows(client, db, admin_headers):
    _make_post(db, "exists")
    resp = client.post(
        "/api/admin/posts/bulk",
        json={"posts": [
            {"slug": "one", "title": "One"},
            {"slug": "Bad Slug", "title": "Bad"},
            {"slug": "exists", "title": "Dupe"},
        ]},
        headers=admin_headers,
    )
    data = resp.json()["data"]
    assert data["count"] == 1
    assert [post["slug"] for post in data["created"]] == ["one"]
    assert len(data["skipped"]) == 2


def test_bulk_create_requires_rows(client, admin_headers):
    resp = client.post("/api/admin/posts/bulk", json={"posts": []}, headers=admin_headers)
    assert resp.json() == {"ok": False, "message": "No posts to create"}


def test_csv_import(client, db, admin_headers):
    csv_text = (
        "title,slug,content,metaDescription,featuredBanner,status\n"
        '"Hello, CSV",hello-csv,Body,,,draft\n'
        "Broken,row\n"
        "Second,second-csv,,,,PUBLISHED\n"
    )
    resp = client.post(
        "/api/admin/posts/import",
        files={"file": ("posts.csv", csv_text.encode("utf-8"), "text/csv")},
        headers=admin_headers,
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["count"] == 2
    assert data["warnings"] == ["Row 3 has incorrect number of columns"]
    assert db.query(Post).filter(Post.slug == "second-csv").one().status == PUBLISHED


def test_csv_import_accepts_uppercase_padded_name(client, db, admin_headers):
    resp = client.post(
        "/api/admin/posts/import",
        files={"file": ("POSTS.CSV ", b"title,slug\nPadded,padded\n", "text/csv")},
        headers=admin_headers,
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["count"] == 1
    assert db.query(Post).filter(Post.slug == "padded").count() == 1


def test_csv_import_rejects_other_files(client, admin_headers):
    resp = client.post(
        "/api/admin/posts/import",
        files={"file": ("posts.txt", b"title,slug\nA,a\n", "text/plain")},
        headers=admin_headers,
    )
    assert resp.status_code == 400


def test_admin_list_filters(client, db, admin_headers):
    _make_post(db, "alpha")
    _make_post(db, "beta", status=PUBLISHED)
    resp = client.get("/api/admin/posts", params={"status": "published"}, headers=admin_headers)
    assert [post["slug"] for post in resp.json()["data"]["posts"]] == ["beta"]
    resp = client.get("/api/admin/posts", params={"q": "ALP"}, headers=admin_headers)
    assert [post["slug"] for post in resp.json()["data"]["posts"]] == ["alpha"]
