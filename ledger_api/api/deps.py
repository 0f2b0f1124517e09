from __future__ import annotations

from fastapi import Cookie, HTTPException, Request, status

from ledger_api.core.logging import get_logger

logger = get_logger(__name__)

SESSION_COOKIE = "sessionId"
SESSION_MAX_AGE = 60 * 60 * 24 * 7  # 7 days


def log_request(request: Request) -> None:
    logger.info("[%s %s]", request.method, request.url.path)


def optional_session_id(
    session_id: str | None = Cookie(default=None, alias=SESSION_COOKIE),
) -> str | None:
    return session_id or None


def require_session_id(
    session_id: str | None = Cookie(default=None, alias=SESSION_COOKIE),
) -> str:
    """
    Session guard for read routes. The cookie value is an opaque key,
    not a credential: it is passed through unchanged.
    """
    if not session_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized.")
    return session_id
