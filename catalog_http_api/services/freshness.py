# catalog_http_api/services/freshness.py

"""
Conditional-request support for the export endpoint.

The freshness of a filtered view is the latest ``updated_at`` among its
rows. From it we derive:

- ``Last-Modified``: that instant, truncated to whole seconds, or "now"
  when the view is empty (an empty body is never 304'd against a body
  cached before any data existed);
- ``ETag``: md5 of the full request URL (query string included) followed by
  the unix timestamp of ``Last-Modified``. Distinct filters never share a
  token and an unchanged view always reproduces it.

The max(updated_at) read and the projection are separate reads. A write
landing between them can make the served body newer than its validator;
clients simply revalidate on their next request.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Optional

from catalog_http_api.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class Freshness:
    last_modified: datetime
    etag: str

    @property
    def etag_header(self) -> str:
        return f'"{self.etag}"'

    @property
    def last_modified_header(self) -> str:
        return format_datetime(self.last_modified, usegmt=True)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo; they are stored as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def resolve_last_modified(
    max_updated_at: Optional[datetime],
    now: Optional[datetime] = None,
) -> datetime:
    if max_updated_at is None:
        max_updated_at = now or datetime.now(timezone.utc)
    return _as_utc(max_updated_at).replace(microsecond=0)


def compute_etag(request_url: str, last_modified: datetime) -> str:
    timestamp = int(_as_utc(last_modified).timestamp())
    return hashlib.md5(f"{request_url}{timestamp}".encode("utf-8")).hexdigest()


def build_freshness(
    request_url: str,
    max_updated_at: Optional[datetime],
    now: Optional[datetime] = None,
) -> Freshness:
    last_modified = resolve_last_modified(max_updated_at, now=now)
    return Freshness(
        last_modified=last_modified,
        etag=compute_etag(request_url, last_modified),
    )


def parse_http_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an HTTP-date header value, returning None when it is unusable.
    """
    if not value:
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        log.debug("unparseable_http_date", value=value)
        return None
    return _as_utc(parsed)


def is_not_modified(
    freshness: Freshness,
    if_none_match: Optional[str] = None,
    if_modified_since: Optional[str] = None,
) -> bool:
    """
    Decide whether a conditional request can be answered with 304.

    ``If-None-Match`` is checked first (surrounding quotes ignored), then
    ``If-Modified-Since`` (satisfied when it is at or after
    ``Last-Modified``).
    """
    if if_none_match is not None and if_none_match.strip().strip('"') == freshness.etag:
        return True

    since = parse_http_date(if_modified_since)
    if since is not None and since >= freshness.last_modified:
        return True

    return False


__all__ = [
    "Freshness",
    "resolve_last_modified",
    "compute_etag",
    "build_freshness",
    "parse_http_date",
    "is_not_modified",
]
