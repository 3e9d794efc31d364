# catalog_http_api/schemas/common.py

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Base / shared types
# ---------------------------------------------------------------------------


class APIModel(BaseModel):
    """
    Base Pydantic model for all HTTP API schemas.

    Common config:
    - forbid extra fields so clients get early feedback on mistakes
    - populate_by_name to make future renames easier
    - from_attributes so ORM rows can be validated directly
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


class Pagination(APIModel):
    """
    Offset pagination metadata shared by list endpoints.
    """

    total: int = Field(..., description="Total number of records matching the query.")
    page: int = Field(1, description="1-based index of the current page.")
    page_size: int = Field(50, description="Maximum number of items per page.")
    last_page: int = Field(1, description="Index of the last non-empty page (>= 1).")

    @classmethod
    def build(cls, *, total: int, page: int, page_size: int, **extra: Any) -> "Pagination":
        last_page = max(1, -(-total // page_size)) if page_size else 1
        return cls(
            total=total, page=page, page_size=page_size, last_page=last_page, **extra
        )


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------


class ErrorDetail(APIModel):
    """
    Machine- and human-readable error description.
    """

    code: str = Field(
        ...,
        description="Stable, machine-readable error code (e.g. 'store_unavailable').",
    )
    message: str = Field(
        ...,
        description="Human-readable explanation of the error.",
    )


class ErrorResponse(APIModel):
    """
    Standard error envelope for failures not raised as HTTPException.
    """

    error: ErrorDetail


__all__ = [
    "APIModel",
    "Pagination",
    "ErrorDetail",
    "ErrorResponse",
]
