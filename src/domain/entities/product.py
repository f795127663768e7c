"""
Product Entity

A product made by a manufacturer, of a given tool type.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column
from sqlmodel import Field

from src.domain.base import AuditedModel


class Product(AuditedModel, table=True):
    __tablename__ = "products"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(index=True, max_length=255)
    short_description: str
    long_description: Optional[str] = None

    photo: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
    video: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
    details: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    information_links: List[Dict[str, Any]] = Field(
        default_factory=list, sa_column=Column(JSON)
    )

    manufacturer_id: UUID = Field(foreign_key="manufacturers.id", index=True)
    tool_id: UUID = Field(foreign_key="tools.id", index=True)
