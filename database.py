from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from config import DATABASE_URL


def build_engine(url: str = DATABASE_URL):
    """Create an engine; SQLite needs cross-thread access for FastAPI's threadpool."""
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    return create_engine(url, connect_args=connect_args)


# SQLAlchemy engine and session factory, built once per process
engine = build_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db(bind=None) -> None:
    """Create the users table if it does not exist yet."""
    # models must be imported so the table is registered on Base.metadata
    import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
