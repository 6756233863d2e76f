"""FastAPI entry point: middleware, error handlers and API routers."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import Base, engine, is_configured
import app.models  # noqa: F401 - registers model metadata
from app.routers import (
    apps, audit, auth, experiences, footer, posts, promos, public, skills, tools, worksamples,
)
from app.services.action_result import ActionResult, to_response
from app.utils.errors import ActionError

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Portfolio CMS",
    description="Admin API and public read API for a personal portfolio site",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ActionError)
def handle_action_error(request: Request, exc: ActionError):
    return to_response(ActionResult.from_error(exc))


@app.exception_handler(RequestValidationError)
def handle_request_validation(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid data"
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        detail = str(errors[0].get("msg") or message)
        message = f"{location}: {detail}" if location else detail
    return to_response(ActionResult.failure(message))


# Register all routers
app.include_router(auth.router)
app.include_router(posts.router)
app.include_router(experiences.router)
app.include_router(apps.router)
app.include_router(worksamples.router)
app.include_router(skills.router)
app.include_router(tools.router)
app.include_router(promos.router)
app.include_router(footer.router)
app.include_router(audit.router)
app.include_router(public.router)


@app.on_event("startup")
def ensure_schema():
    # Creates any missing tables; the app stays up without a datastore.
    if engine is None:
        logger.warning("[startup] no datastore configured; skipping schema creation")
        return
    Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "Portfolio CMS", "database": is_configured()}
