"""
Pagination contracts between list use cases and repositories.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ListQuery(BaseModel):
    """
    Paginated listing request.

    filters holds raw query-string values keyed by query field name
    (e.g. ``name``, ``active``, ``tools``); each repository decides which
    of them it understands.
    """

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)
    pagination: bool = True
    filters: Dict[str, Any] = Field(default_factory=dict)


class Page(BaseModel):
    """One page of results plus paging metadata"""

    docs: List[Any]
    total_docs: int
    limit: int
    page: int
    total_pages: int
    has_prev_page: bool
    has_next_page: bool
    prev_page: Optional[int]
    next_page: Optional[int]

    @classmethod
    def build(cls, docs: List[Any], total_docs: int, page: int, limit: int) -> "Page":
        total_pages = max(1, -(-total_docs // limit)) if limit else 1
        return cls(
            docs=docs,
            total_docs=total_docs,
            limit=limit,
            page=page,
            total_pages=total_pages,
            has_prev_page=page > 1,
            has_next_page=page < total_pages,
            prev_page=page - 1 if page > 1 else None,
            next_page=page + 1 if page < total_pages else None,
        )
