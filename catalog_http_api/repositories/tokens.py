# catalog_http_api/repositories/tokens.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import models


class TokensRepository:
    """
    Data-access layer around issued API tokens.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def get_by_hash(self, token_hash: str) -> Optional[models.ApiToken]:
        stmt = select(models.ApiToken).where(models.ApiToken.token_hash == token_hash)
        return self.session.execute(stmt).scalar_one_or_none()

    def create(self, *, name: str, token_hash: str) -> models.ApiToken:
        token = models.ApiToken(name=name, token_hash=token_hash)
        self.session.add(token)
        self.session.flush()
        return token

    def mark_used(
        self,
        token: models.ApiToken,
        *,
        min_interval: timedelta = timedelta(0),
        now: Optional[datetime] = None,
    ) -> bool:
        """
        Stamp ``last_used_at`` unless it was stamped less than
        ``min_interval`` ago. Returns whether the row was changed.
        """
        now = now or models.utcnow()
        last = token.last_used_at
        if last is not None:
            if last.tzinfo is None:
                last = last.replace(tzinfo=timezone.utc)
            if now - last < min_interval:
                return False

        token.last_used_at = now
        self.session.flush()
        return True
