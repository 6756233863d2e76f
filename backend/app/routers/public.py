"""Unauthenticated read routes used by the public site."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_optional_admin
from app.models.admin_user import AdminUser
from app.services import public_service
from app.services.action_result import run_read, to_response

router = APIRouter(prefix="/api", tags=["public"])


def _respond(result):
    if result.ok:
        return result.data
    return to_response(result)


@router.get("/posts")
def list_posts(db: Optional[Session] = Depends(get_db)):
    return _respond(run_read(db, lambda: public_service.list_published_posts(db), failure_message="Failed to load posts"))


@router.get("/posts/{slug}")
def get_post(
    slug: str,
    db: Optional[Session] = Depends(get_db),
    admin: Optional[AdminUser] = Depends(get_optional_admin),
):
    # Admins may preview drafts and scheduled posts.
    fetch = public_service.get_post_preview if admin is not None else public_service.get_published_post
    return _respond(run_read(db, lambda: fetch(db, slug), failure_message="Failed to load post"))


@router.get("/experiences")
def list_experiences(db: Optional[Session] = Depends(get_db)):
    return _respond(
        run_read(db, lambda: public_service.list_published_experiences(db), failure_message="Failed to load experiences")
    )


@router.get("/experiences/summary")
def list_experience_summaries(db: Optional[Session] = Depends(get_db)):
    return _respond(
        run_read(db, lambda: public_service.list_experience_summaries(db), failure_message="Failed to load experiences")
    )


@router.get("/skills")
def list_skills(db: Optional[Session] = Depends(get_db)):
    return _respond(run_read(db, lambda: public_service.list_public_skills(db), failure_message="Failed to load skills"))


@router.get("/worksamples")
def list_work_samples(db: Optional[Session] = Depends(get_db)):
    return _respond(
        run_read(db, lambda: public_service.list_published_work_samples(db), failure_message="Failed to load work samples")
    )


@router.get("/apps")
def list_apps(db: Optional[Session] = Depends(get_db)):
    return _respond(run_read(db, lambda: public_service.list_published_web_apps(db), failure_message="Failed to load apps"))


@router.get("/tools")
def list_tools(db: Optional[Session] = Depends(get_db)):
    return _respond(run_read(db, lambda: public_service.list_published_tools(db), failure_message="Failed to load tools"))


@router.get("/promos/active")
def list_active_promos(db: Optional[Session] = Depends(get_db)):
    return _respond(
        run_read(db, lambda: public_service.list_active_promos(db), failure_message="Failed to load promo sections")
    )
