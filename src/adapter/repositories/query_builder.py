"""
Builds SQL filters for list endpoints from declared queryable fields.

Every resource declares which query-string parameters it understands and
how they map onto columns; the builder turns the raw parameters into WHERE
clauses. Unknown parameters are ignored.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional
from uuid import UUID

from sqlalchemy import ColumnElement


STRING = "string"
BOOLEAN = "boolean"
ARRAY = "array"


@dataclass(frozen=True)
class QueryableField:
    query_field: str
    column: Any
    type: str
    regex: bool = False
    # Builds the clause for ARRAY fields that are not plain columns
    clause: Optional[Callable[[List[UUID]], ColumnElement]] = None


def _as_flag(value: Any) -> Optional[bool]:
    """Query flags are 0/1; anything else leaves the default in place"""
    if isinstance(value, bool):
        return value
    if value in (0, "0"):
        return False
    if value in (1, "1"):
        return True
    return None


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return [v for v in value if v not in (None, "")]
    return [value] if value != "" else []


def build_filters(
    model, fields: List[QueryableField], params: Dict[str, Any]
) -> List[ColumnElement]:
    """
    Build WHERE clauses for a listing.

    Args:
        model: Entity class carrying is_active / is_deleted columns
        fields: Queryable fields declared by the repository
        params: Raw query-string values keyed by query field

    Returns:
        List of clauses to AND together. Defaults to active, non-deleted rows;
        the ``active`` / ``deleted`` flags override those defaults.
    """
    defaults: Dict[str, ColumnElement] = {
        "is_deleted": model.is_deleted == False,
        "is_active": model.is_active == True,
    }
    clauses: List[ColumnElement] = []

    for field in fields:
        value = params.get(field.query_field)

        if field.type == STRING:
            if value:
                if field.regex:
                    clauses.append(field.column.icontains(value, autoescape=True))
                else:
                    clauses.append(field.column == value)

        elif field.type == BOOLEAN:
            flag = _as_flag(value)
            if flag is not None:
                defaults[field.column.key] = field.column == flag

        elif field.type == ARRAY:
            values = [UUID(str(v)) for v in _as_list(value)]
            if values:
                if field.clause is not None:
                    clauses.append(field.clause(values))
                else:
                    clauses.append(field.column.in_(values))

    return list(defaults.values()) + clauses
