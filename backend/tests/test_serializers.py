from datetime import datetime, timezone

from app.models.experience import Experience
from app.models.post import PUBLISHED, Post
from app.schemas.experience import ExperienceOut
from app.schemas.post import PostOut
from app.utils.serializers import deserialize, deserialize_datetime, serialize_experience, serialize_post


def test_post_round_trip(db):
    published_at = datetime(2024, 1, 1, 9, 30, 15, 123000, tzinfo=timezone.utc)
    post = Post(
        slug="round-trip",
        title="Round trip",
        status=PUBLISHED,
        published=True,
        published_at=published_at,
        status_changed_at=published_at,
        status_changed_by="admin@example.com",
    )
    db.add(post)
    db.commit()
    db.refresh(post)

    data = serialize_post(post)
    assert data["status"] == "published"
    assert data["published_at"].startswith("2024-01-01T09:30:15")
    assert data["published_at"].endswith("Z")
    assert deserialize_datetime(data["published_at"]) == published_at
    assert deserialize(PostOut, data) == PostOut.model_validate(post)


def test_experience_serializer_normalises_json_fields(db):
    experience = Experience(
        company="Acme",
        title="Engineer",
        start_date=datetime(2020, 5, 1, tzinfo=timezone.utc),
        achievements=None,
        skills="Python, SQL",
        career_progression=[{"title": "Intern", "period": "2019"}, "junk"],
        previous_role={"title": "", "period": "2018"},
        published=True,
    )
    db.add(experience)
    db.commit()
    db.refresh(experience)

    data = serialize_experience(experience)
    assert data["start_date"] == "2020-05-01T00:00:00Z"
    assert data["achievements"] == []
    assert data["skills"] == ["Python", "SQL"]
    assert data["career_progression"][0]["type"] == "standard"
    assert len(data["career_progression"]) == 1
    assert data["previous_role"] is None
    assert deserialize(ExperienceOut, data) == ExperienceOut.model_validate(experience)
