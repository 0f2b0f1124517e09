from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ledger_api.core.exceptions import StorageError
from ledger_api.core.logging import get_logger
from ledger_api.database.base import Base

logger = get_logger(__name__)


def init_db(engine: Engine) -> None:
    # Registers the models on the metadata before create_all
    from ledger_api.models.transaction import Transaction  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as exc:
        raise StorageError(f"could not create schema on {engine.url!r}") from exc
    logger.info("Schema ready on %r", engine.url)


def drop_db(engine: Engine) -> None:
    from ledger_api.models.transaction import Transaction  # noqa: F401

    try:
        Base.metadata.drop_all(bind=engine)
    except SQLAlchemyError as exc:
        raise StorageError(f"could not drop schema on {engine.url!r}") from exc
