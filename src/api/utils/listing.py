from typing import Optional

from fastapi import Query

from src.app.repositories.pagination import ListQuery


def base_list_params(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    pagination: bool = Query(True),
    name: Optional[str] = Query(None),
    active: Optional[int] = Query(None, ge=0, le=1),
    deleted: Optional[int] = Query(None, ge=0, le=1),
) -> ListQuery:
    """Paging and filters every catalog listing understands"""
    return ListQuery(
        page=page,
        limit=limit,
        pagination=pagination,
        filters={"name": name, "active": active, "deleted": deleted},
    )
