# catalog_http_api/routers/tags.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from catalog_http_api.db.session import get_session
from catalog_http_api.repositories import TagsRepository
from catalog_http_api.security import require_token

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    dependencies=[Depends(require_token)],
)


@router.get(
    "",
    response_model=List[str],
    summary="List tag names",
    description="Names usable in the `tags` filters and payloads, sorted.",
)
def list_tags(session: Session = Depends(get_session)) -> List[str]:
    return TagsRepository(session).list_names()
