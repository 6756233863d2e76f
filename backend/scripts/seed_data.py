"""Seed the database with an admin account and sample portfolio content."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import datetime, timedelta, timezone
from app.config import settings
from app.database import SessionLocal, engine, Base
import app.models  # noqa: F401

from app.models.admin_user import AdminUser
from app.models.experience import Experience
from app.models.post import DRAFT, PUBLISHED, SCHEDULED, Post
from app.models.promo_section import PRE_FOOTER_CARD, TOP_BAR, PromoSection
from app.models.site_settings import SiteSettings
from app.models.skill import Skill
from app.models.tool import Tool
from app.models.web_app import WebApp
from app.models.work_sample import WorkSample


def seed():
    if engine is None:
        print("DATABASE_URL is not configured. Nothing to seed.")
        return
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(Post).count() > 0:
            print("Database already seeded. Skipping.")
            return

        now = datetime.now(timezone.utc)
        for email in settings.admin_emails() or ["admin@example.com"]:
            if not db.query(AdminUser).filter(AdminUser.email == email).first():
                db.add(AdminUser(email=email, name=email.split("@")[0]))

        db.add_all([
            Post(slug="hello-world", title="Hello, world", content="First post on the new site.",
                 status=PUBLISHED, published=True, published_at=now - timedelta(days=7),
                 status_changed_at=now - timedelta(days=7), status_changed_by="seed"),
            Post(slug="building-a-cms", title="Building a small CMS", content="Notes on the admin dashboard.",
                 status=SCHEDULED, published=False, scheduled_at=now + timedelta(days=3),
                 status_changed_at=now, status_changed_by="seed"),
            Post(slug="draft-ideas", title="Draft ideas", status=DRAFT, published=False,
                 status_changed_at=now, status_changed_by="seed"),
        ])

        db.add(Experience(
            company="Acme Corp",
            title="Senior Engineer",
            period="2021 - Present",
            location="Remote",
            start_date=datetime(2021, 3, 1, tzinfo=timezone.utc),
            description="Led the platform team.",
            achievements=["Cut deploy time by half"],
            responsibilities=["Platform roadmap", "Mentoring"],
            skills=["Python", "PostgreSQL", "FastAPI"],
            career_progression=[{
                "title": "Engineer", "period": "2021 - 2022", "type": "standard",
                "description": "", "responsibilities": [], "skills": ["Python"],
            }],
            previous_role={"title": "Developer", "period": "2018 - 2021"},
        ))
        db.add(WebApp(name="Habit Tracker", url="https://habits.example.com", description="Tiny habit tracker."))
        db.add(WorkSample(title="Design system audit", url="https://example.com/audit"))
        db.add(Skill(name="Python", slug="python", level=5, category="Languages"))
        db.add(Tool(name="Linear", url="https://linear.app", description="Issue tracking."))
        db.add_all([
            PromoSection(title="Now booking consulting", placement=TOP_BAR, is_enabled=True,
                         link_label="Get in touch", link_href="/contact"),
            PromoSection(title="Subscribe to the newsletter", placement=PRE_FOOTER_CARD,
                         is_enabled=False, display_order=1),
        ])
        db.add(SiteSettings(brand_name="Kejsan", brand_role="Product engineer",
                            email="hello@example.com", footer_tagline="Building calm software.",
                            contact_cta_label="Say hello", contact_cta_href="/contact"))
        db.commit()
        print("Seed data inserted successfully.")
    except Exception as e:
        db.rollback()
        print(f"Seeding failed: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed()
