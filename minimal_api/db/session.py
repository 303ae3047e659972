from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from minimal_api.core.config import settings
from minimal_api.models import Base

DATABASE_URL = settings.DATABASE_URL

# SQLite connections are shared across the request thread pool
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind=None):
    """Creates every table known to the models. Safe to call multiple times."""
    Base.metadata.create_all(bind=bind or engine)
