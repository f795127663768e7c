from datetime import UTC, datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator
from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    """Timezone-aware UTC timestamp"""
    return datetime.now(UTC)


class UTCDateTime(TypeDecorator):
    """
    Stores timestamps as naive UTC and loads them back as aware UTC.

    Naive values are rejected so a local time never lands in a column.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError("Datetime values must have timezone information")
        return value.astimezone(UTC).replace(tzinfo=None)

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        return value.replace(tzinfo=UTC)


class AuditedModel(SQLModel):
    """
    Audit block shared by every persisted entity.

    Rows are never physically removed: deletion flips ``is_deleted`` and
    deactivation flips ``is_active``.
    """

    is_active: bool = Field(default=True, index=True)
    is_deleted: bool = Field(default=False, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    created_by: Optional[UUID] = Field(default=None)
    last_edit_at: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    last_edit_by: Optional[UUID] = Field(default=None)
