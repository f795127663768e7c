"""
Technique Entity
"""

from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column
from sqlmodel import Field

from src.domain.base import AuditedModel


class Technique(AuditedModel, table=True):
    __tablename__ = "techniques"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(index=True, max_length=255)
    description: str
    acronym: str = Field(max_length=50)

    photo: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
    information_links: List[Dict[str, Any]] = Field(
        default_factory=list, sa_column=Column(JSON)
    )
