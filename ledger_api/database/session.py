from __future__ import annotations

from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from ledger_api.core.config import Settings


def build_database_url(settings: Settings) -> str:
    """SQLAlchemy URL for the configured client.

    For sqlite ``DATABASE_URL`` is a file name, for pg a connection URL.
    """
    url = settings.DATABASE_URL
    if settings.DATABASE_CLIENT == "sqlite":
        if url.startswith("sqlite:"):
            return url
        return f"sqlite:///{url}"

    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+psycopg://" + url[len(prefix):]
    return url


def build_engine(settings: Settings) -> Engine:
    connect_args = {}
    if settings.DATABASE_CLIENT == "sqlite":
        connect_args["check_same_thread"] = False  # connections cross worker threads

    return create_engine(
        build_database_url(settings),
        connect_args=connect_args,
        pool_pre_ping=settings.DATABASE_CLIENT == "pg",
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
