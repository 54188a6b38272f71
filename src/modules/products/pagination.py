"""Page/limit parsing and the paginated result for the list endpoint.

Query values that are missing, non-integer or below 1 fall back to the
defaults; ``limit`` is capped at the configured maximum.  This keeps
``limit`` strictly positive so ``totalPages`` is always defined.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List

from django.conf import settings

DEFAULT_PAGE = 1


def parse_positive_int(raw: Any, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value >= 1 else default


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_query(
        cls,
        query_params: Mapping[str, Any],
        default_limit: int | None = None,
        max_limit: int | None = None,
    ) -> PageRequest:
        """Parse ``page`` and ``limit`` from request query parameters."""
        if default_limit is None:
            default_limit = settings.PRODUCTS_DEFAULT_PAGE_LIMIT
        if max_limit is None:
            max_limit = settings.PRODUCTS_MAX_PAGE_LIMIT

        page = parse_positive_int(query_params.get("page"), DEFAULT_PAGE)
        limit = parse_positive_int(query_params.get("limit"), default_limit)
        return cls(page=page, limit=min(limit, max_limit))


@dataclass(frozen=True)
class ProductPage:
    """One pagination window plus the total count it was cut from."""

    items: List[Any]
    page_request: PageRequest
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_request.limit)
