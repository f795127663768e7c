"""
Tool Entity

A tool type that products belong to.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column
from sqlmodel import Field

from src.domain.base import AuditedModel


class Tool(AuditedModel, table=True):
    __tablename__ = "tools"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(index=True, max_length=255)
    description: str

    photo: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
    information_links: List[Dict[str, Any]] = Field(
        default_factory=list, sa_column=Column(JSON)
    )
