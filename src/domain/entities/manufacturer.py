"""
Manufacturer Entity

Manufacturers and the tool types they produce.
"""

from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from src.domain.base import AuditedModel


class ManufacturerTool(SQLModel, table=True):
    """Link row between a manufacturer and one of its tools"""

    __tablename__ = "manufacturer_tools"

    manufacturer_id: UUID = Field(foreign_key="manufacturers.id", primary_key=True)
    tool_id: UUID = Field(foreign_key="tools.id", primary_key=True)


class Manufacturer(AuditedModel, table=True):
    """
    Manufacturer entity.

    Business Rules:
    - Name is unique among non-deleted manufacturers
    - Tools are kept in manufacturer_tools, replaced as a whole on update
    """

    __tablename__ = "manufacturers"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(index=True, max_length=255)
    description: str

    logo: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
