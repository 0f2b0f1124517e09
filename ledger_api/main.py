from __future__ import annotations

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ledger_api import __version__
from ledger_api.core.config import Settings, load_settings
from ledger_api.core.exceptions import ConfigurationError
from ledger_api.core.logging import get_logger, setup_logging
from ledger_api.database.session import build_engine, build_session_factory

logger = get_logger(__name__)


async def _storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        "Storage error on [%s %s]", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error."},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API: one engine/session factory per app, kept on ``app.state``."""
    settings = settings or load_settings()
    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("ledger-api starting (env=%s, db=%s)", settings.NODE_ENV, settings.DATABASE_CLIENT)
        yield
        engine.dispose()

    app = FastAPI(title="Ledger API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_exception_handler(SQLAlchemyError, _storage_error_handler)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------
    from ledger_api.api.v1.routes import transactions

    app.include_router(transactions.router, prefix="/transactions", tags=["transactions"])

    return app


def run() -> None:
    try:
        settings = load_settings()
    except ConfigurationError:
        setup_logging()
        logger.critical("Refusing to start with invalid configuration.")
        raise SystemExit(1)

    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    app = create_app(settings)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
