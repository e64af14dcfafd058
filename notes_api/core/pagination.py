"""
Pagination Utilities.

Page/limit parameters for list endpoints. Query values arrive as raw
strings and are coerced leniently: anything unusable falls back to the
configured defaults, so the computed offset is never negative.
"""

from dataclasses import dataclass

from fastapi import Query

from notes_api.core.config import get_app_config
from notes_api.core.config_schema import PaginationSchema

# Largest offset a signed 64-bit OFFSET clause accepts
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PageParams:
    """Resolved page number and size."""

    page: int
    limit: int

    @property
    def offset(self) -> int:
        """Number of items to skip."""
        return (self.page - 1) * self.limit


def _coerce_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def resolve_page_params(
    page: str | None,
    limit: str | None,
    settings: PaginationSchema,
) -> PageParams:
    """
    Turn raw query strings into usable page parameters.

    Args:
        page: Raw `page` query value (1-based)
        limit: Raw `limit` query value
        settings: Pagination defaults and bounds

    Returns:
        PageParams with page >= 1, 1 <= limit <= max_limit and an offset
        that fits in MAX_OFFSET
    """
    page_number = _coerce_int(page, settings.default_page)
    if page_number < 1:
        page_number = settings.default_page

    page_size = _coerce_int(limit, settings.default_limit)
    if page_size < 1:
        page_size = settings.default_limit
    page_size = min(page_size, settings.max_limit)

    return PageParams(
        page=min(page_number, MAX_OFFSET // page_size + 1),
        limit=page_size,
    )


def get_page_params(
    page: str | None = Query(
        default=None,
        description="Page number, starting at 1",
    ),
    limit: str | None = Query(
        default=None,
        description="Maximum number of items to return",
    ),
) -> PageParams:
    """
    FastAPI dependency for page parameters.

    Usage:
        @router.get("/items")
        async def list_items(
            pagination: PageParams = Depends(get_page_params),
        ):
            ...
    """
    return resolve_page_params(page, limit, get_app_config().application.pagination)
