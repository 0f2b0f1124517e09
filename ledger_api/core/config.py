from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from ledger_api.core.exceptions import ConfigurationError
from ledger_api.core.logging import get_logger

logger = get_logger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["standard", "json"]


class Settings(BaseModel):
    NODE_ENV: Literal["development", "test", "production"] = "production"
    DATABASE_URL: str = Field(min_length=1)
    DATABASE_CLIENT: Literal["sqlite", "pg"] = "sqlite"
    PORT: int = 3333
    HOST: str = "0.0.0.0"
    LOG_LEVEL: LogLevel = "INFO"
    LOG_FORMAT: LogFormat = "standard"


def load_env_file(node_env: str | None = None, base_dir: Path | None = None) -> bool:
    """Load ``.env`` (or ``.env.test`` under test) into ``os.environ``.

    Variables already present in the environment win over the file.
    Returns True if a file was found and read.
    """
    base = base_dir or Path.cwd()
    filename = ".env.test" if node_env == "test" else ".env"
    return load_dotenv(base / filename, override=False)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read and validate settings, failing fast on bad input.

    With no ``environ`` the process environment is used, after the matching
    dotenv file has been loaded into it.
    """
    if environ is None:
        load_env_file(os.getenv("NODE_ENV"))
        environ = os.environ

    data = {name: environ[name] for name in Settings.model_fields if name in environ}
    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        logger.error("Invalid environment variables: %s", errors)
        raise ConfigurationError("Invalid environment variables.", errors) from exc
