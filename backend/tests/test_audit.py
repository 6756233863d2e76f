import json
from datetime import datetime, timezone

from app.models.audit_entry import AuditEntry
from app.models.post import Post
from app.models.tool import Tool
from app.services import content_service
from app.services.audit_service import build_audit_diff, query_audit_log, record_audit, snapshot_row
from app.services.post_service import create_post
from app.services.tool_service import update_tool


def test_build_audit_diff_create():
    diff = build_audit_diff(None, {"title": "Hello", "published": False})
    assert diff["before"] is None
    assert diff["after"] == {"title": "Hello", "published": False}
    assert diff["changes"] == {
        "title": {"before": None, "after": "Hello"},
        "published": {"before": None, "after": False},
    }


def test_build_audit_diff_update_lists_only_changed_fields():
    before = {"title": "Hello", "published": False, "slug": "hello"}
    after = {"title": "Hello", "published": True, "slug": "hello"}
    diff = build_audit_diff(before, after)
    assert diff["changes"] == {"published": {"before": False, "after": True}}
    assert diff["before"] == before
    assert diff["after"] == after


def test_build_audit_diff_delete():
    diff = build_audit_diff({"id": 3}, None)
    assert diff["after"] is None
    assert diff["changes"] == {"id": {"before": 3, "after": None}}


def test_snapshot_row_is_json_safe(db):
    post = Post(slug="hello", title="Hello", published_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
    db.add(post)
    db.commit()
    snapshot = snapshot_row(post)
    assert snapshot["published_at"] == "2024-01-01T00:00:00Z"
    assert snapshot["slug"] == "hello"
    json.dumps(snapshot)


def test_record_audit_joins_caller_transaction(db):
    record_audit(db, actor=None, entity_type="Post", entity_id=7, action="DELETE", diff={"before": None})
    db.rollback()
    assert db.query(AuditEntry).count() == 0

    entry = record_audit(db, actor="admin@example.com", entity_type="Post", entity_id=7, action="DELETE", diff={})
    db.commit()
    assert entry.entity_id == "7"
    assert db.query(AuditEntry).count() == 1


def test_record_audit_uses_unknown_actor(db):
    entry = record_audit(db, actor=None, entity_type="Tool", entity_id=1, action="CREATE", diff={})
    db.commit()
    assert entry.actor_email == "unknown"


def _seed_entries(db):
    rows = [
        ("admin@example.com", "Post", "hello", "CREATE"),
        ("admin@example.com", "Post", "hello", "UPDATE"),
        ("editor@example.com", "Experience", "4", "DELETE"),
    ]
    for actor, entity_type, entity_id, action in rows:
        record_audit(db, actor=actor, entity_type=entity_type, entity_id=entity_id, action=action, diff={"changes": {}})
    db.commit()


def test_query_filters(db):
    _seed_entries(db)
    result = query_audit_log(db, action="update")
    assert [entry["action"] for entry in result["entries"]] == ["UPDATE"]
    assert result["filters"]["action"] == "UPDATE"
    assert result["entity_types"] == ["Experience", "Post"]

    result = query_audit_log(db, q="EDITOR")
    assert [entry["entity_type"] for entry in result["entries"]] == ["Experience"]

    result = query_audit_log(db, entity_type="Post")
    assert len(result["entries"]) == 2


def test_query_ignores_unknown_action(db):
    _seed_entries(db)
    result = query_audit_log(db, action="PURGE")
    assert len(result["entries"]) == 3
    assert result["filters"]["action"] is None


def test_query_reports_missing_table(db):
    AuditEntry.__table__.drop(bind=db.get_bind())
    result = query_audit_log(db)
    assert result["table_missing"] is True
    assert result["entries"] == []


def test_audit_endpoint_requires_admin(client):
    resp = client.get("/api/audit")
    assert resp.status_code == 401
    assert resp.json() == {"ok": False, "message": "You are not authorised to perform this action."}


def test_audit_endpoint_lists_mutations(client, admin_headers):
    resp = client.post(
        "/api/admin/tools",
        json={"name": "Linear", "url": "https://linear.app"},
        headers=admin_headers,
    )
    assert resp.status_code == 200, resp.text

    resp = client.get("/api/audit", params={"entityType": "Tool"}, headers=admin_headers)
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["table_missing"] is False
    assert len(data["entries"]) == 1
    entry = data["entries"][0]
    assert entry["action"] == "CREATE"
    assert entry["actor_email"] == "admin@example.com"
    assert entry["diff"]["before"] is None
    assert entry["diff"]["after"]["name"] == "Linear"


def _failing_audit(*args, **kwargs):
    raise RuntimeError("audit down")


def test_failed_audit_rolls_back_create(db, seed_admin, monkeypatch):
    monkeypatch.setattr(content_service, "record_audit", _failing_audit)
    result = create_post(db, seed_admin, {"slug": "x", "title": "X"})
    assert result.ok is False
    assert result.status_code == 500
    assert result.message == "audit down"
    assert db.query(Post).count() == 0
    assert db.query(AuditEntry).count() == 0


def test_failed_audit_rolls_back_update(db, seed_admin, monkeypatch):
    tool = Tool(name="Linear")
    db.add(tool)
    db.commit()
    monkeypatch.setattr(content_service, "record_audit", _failing_audit)
    result = update_tool(db, seed_admin, tool.id, {"name": "Renamed"})
    assert result.ok is False
    db.expire_all()
    assert db.query(Tool).one().name == "Linear"
