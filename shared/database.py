import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

DEFAULT_DATABASE_URL = "sqlite:///./career_recommender.db"


class Base(DeclarativeBase):
    pass


def make_engine(url: Optional[str] = None) -> Engine:
    url = url or os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)

    kwargs: dict = {}
    if url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
            # one shared connection, otherwise every session sees an empty db
            kwargs["poolclass"] = StaticPool

    return create_engine(url, **kwargs)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def db_dependency(SessionLocal):
    """
    Build a FastAPI dependency that yields one session per request.
    """
    def get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    return get_db
