"""Initialize the database - creates all tables (including audit_entries)."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import engine, Base
import app.models  # noqa: F401 - registers all models


def init_db():
    if engine is None:
        print("DATABASE_URL is not configured. Nothing to initialize.")
        return 1
    print("Creating all database tables...")
    Base.metadata.create_all(bind=engine)
    print("Database initialized successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(init_db())
