# catalog_http_api/security.py

from __future__ import annotations

import hashlib
import secrets
from datetime import timedelta
from typing import Optional

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from catalog_http_api.config import Settings, get_config
from catalog_http_api.db.session import get_session
from catalog_http_api.logging import get_logger
from catalog_http_api.repositories.tokens import TokensRepository

log = get_logger(__name__)

# Authenticated reads write `last_used_at` at most this often per token.
TOKEN_USAGE_INTERVAL = timedelta(minutes=1)

# -----------------------------------------------------------------------------
# Token issuing
# -----------------------------------------------------------------------------


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def issue_token(session: Session, name: str) -> str:
    """
    Create a token record and return the plaintext token.

    The plaintext is not stored anywhere; callers must show it right away.
    """
    plaintext = secrets.token_urlsafe(40)
    TokensRepository(session).create(name=name, token_hash=hash_token(plaintext))
    return plaintext


# -----------------------------------------------------------------------------
# Request authentication
# -----------------------------------------------------------------------------

bearer_scheme = APIKeyHeader(name="Authorization", auto_error=False)


def _normalize_presented_token(raw: Optional[str]) -> Optional[str]:
    if not raw:
        return None
    token = raw.strip()
    if token.lower().startswith("bearer "):
        token = token[7:].strip()
    return token or None


def get_settings() -> Settings:
    return get_config()


def require_token(
    authorization: Optional[str] = Security(bearer_scheme),
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Validates the bearer token of the request.

    - With ``auth_required`` off (development/testing) auth is bypassed
      and "dev-bypass" is returned.
    - Missing token -> 401, unknown token -> 403.
    """
    if not settings.auth_required:
        return "dev-bypass"

    presented = _normalize_presented_token(authorization)
    if not presented:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    repo = TokensRepository(session)
    digest = hash_token(presented)
    token = repo.get_by_hash(digest)
    if token is None or not secrets.compare_digest(token.token_hash, digest):
        log.warning("auth_rejected")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid bearer token",
        )

    if repo.mark_used(token, min_interval=TOKEN_USAGE_INTERVAL):
        session.commit()
    return token.name


__all__ = ["hash_token", "issue_token", "get_settings", "require_token"]
