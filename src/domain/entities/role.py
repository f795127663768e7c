"""
Role Entity

Numeric role tiers seeded at startup.
"""

from uuid import UUID, uuid4

from sqlmodel import Field

from src.domain.base import AuditedModel


class Role(AuditedModel, table=True):
    """
    Role entity - immutable reference data.

    Business Rules:
    - number is unique (ADMIN=1, USER=2)
    - Seeded on startup when missing, never edited afterwards
    """

    __tablename__ = "roles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=50)
    description: str = Field(max_length=255)
    number: int = Field(unique=True, index=True)
