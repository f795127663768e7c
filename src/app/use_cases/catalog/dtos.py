"""
Catalog Use Case DTOs (Data Transfer Objects)

Commands carry the raw form values accepted by the write endpoints; JSON
encoded fields (tools, details, information_links, to_be_deleted) arrive as
strings and are parsed by the use cases. Read models are what the API
renders.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


# ============================================================================
# Command DTOs
# ============================================================================


class FileUpload(BaseModel):
    """An uploaded file, already read into memory by the API layer"""

    filename: str
    content_type: str
    content: bytes
    size: int


class ToolCommand(BaseModel):
    name: str
    description: str
    information_links: Optional[str] = None


class TechniqueCommand(BaseModel):
    name: str
    description: str
    acronym: str
    information_links: Optional[str] = None


class ManufacturerCommand(BaseModel):
    name: str
    description: str
    tools: Optional[str] = None


class ProductCommand(BaseModel):
    name: str
    short_description: str
    long_description: Optional[str] = None
    details: Optional[str] = None
    information_links: Optional[str] = None
    manufacturer: UUID
    type: UUID
    # Update only: {"photo": true, "video": true} clears files first
    to_be_deleted: Optional[str] = None


# ============================================================================
# Read models
# ============================================================================


class AuditedRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    is_active: bool
    is_deleted: bool
    created_at: datetime
    created_by: Optional[UUID] = None
    last_edit_at: Optional[datetime] = None
    last_edit_by: Optional[UUID] = None


class ToolRead(AuditedRead):
    description: str
    photo: Optional[Dict[str, Any]] = None
    information_links: List[Dict[str, Any]] = []


class TechniqueRead(AuditedRead):
    description: str
    acronym: str
    photo: Optional[Dict[str, Any]] = None
    information_links: List[Dict[str, Any]] = []


class ManufacturerSummary(AuditedRead):
    description: str
    logo: Optional[Dict[str, Any]] = None


class ManufacturerRead(ManufacturerSummary):
    tools: List[ToolRead] = []


class ProductRead(AuditedRead):
    short_description: str
    long_description: Optional[str] = None
    photo: Optional[Dict[str, Any]] = None
    video: Optional[Dict[str, Any]] = None
    details: List[Dict[str, Any]] = []
    information_links: List[Dict[str, Any]] = []
    manufacturer: Optional[ManufacturerSummary] = None
    type: Optional[ToolRead] = None
