import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.models.admin_user import AdminUser
from app.services import revalidation

settings.ADMIN_EMAILS = "admin@example.com,editor@example.com"

TEST_DB_URL = "sqlite:///./test_portfolio_cms.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


def unconfigured_get_db():
    yield None


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    revalidation.clear_signals()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def unconfigured_client():
    app.dependency_overrides[get_db] = unconfigured_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def seed_admin(db):
    admin = AdminUser(email="admin@example.com", name="Admin")
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


@pytest.fixture
def admin_headers(client, seed_admin):
    resp = client.post("/api/auth/login", json={"email": seed_admin.email})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}
