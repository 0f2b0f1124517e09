"""Pytest configuration and fixtures."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from ledger_api.core.config import Settings
from ledger_api.database.init_db import init_db
from ledger_api.main import create_app


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Test settings backed by a fresh SQLite file."""
    return Settings(NODE_ENV="test", DATABASE_URL=str(tmp_path / "test.db"))


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Application with an empty, migrated schema."""
    application = create_app(settings)
    init_db(application.state.engine)
    return application


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def credit() -> dict:
    return {"title": "Credit transaction", "amount": 5000, "type": "credit"}


@pytest.fixture
def debit() -> dict:
    return {"title": "Debit transaction", "amount": 2000, "type": "debit"}


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Undo handler/level changes made by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("ledger_api").setLevel(logging.NOTSET)
