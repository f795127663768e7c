"""
Catalog Resources

Per-resource knowledge shared by the generic catalog use cases: which
repository holds the rows, which upload slots exist, how form values become
column values and how rows are rendered.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from pydantic import BaseModel

from src.app.repositories.catalog_repository import ICatalogRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    IMAGE_SUBTYPES,
    VIDEO_SUBTYPES,
    FileField,
    Manufacturer,
    Product,
    Technique,
    Tool,
)
from src.libs.result import Error, ErrorKind, Result, Return
from .dtos import (
    ManufacturerCommand,
    ManufacturerRead,
    ManufacturerSummary,
    ProductCommand,
    ProductRead,
    TechniqueCommand,
    TechniqueRead,
    ToolCommand,
    ToolRead,
)


def parse_json_field(field: str, raw: Optional[str], default: Any) -> Result[Any]:
    """Parse a JSON encoded form field; missing or blank gives default"""
    if raw is None or not raw.strip():
        return Return.ok(default)
    try:
        value = json.loads(raw)
    except ValueError:
        return Return.err(
            Error("INVALID_JSON", f"Field {field} must be valid JSON!", ErrorKind.validation)
        )
    if not isinstance(value, type(default)):
        return Return.err(
            Error(
                "INVALID_JSON",
                f"Field {field} must be a JSON {type(default).__name__}!",
                ErrorKind.validation,
            )
        )
    return Return.ok(value)


def parse_id_list(field: str, raw: Optional[str]) -> Result[List[UUID]]:
    parsed = parse_json_field(field, raw, [])
    if parsed.is_err():
        return parsed
    try:
        return Return.ok([UUID(str(value)) for value in parsed.value])
    except ValueError:
        return Return.err(
            Error("INVALID_ID", f"Field {field} must hold valid ids!", ErrorKind.validation)
        )


class CatalogResource(ABC):
    """
    Base descriptor of a catalog resource.

    Attributes:
        label: Human readable singular name used in messages
        folder: Public folder uploads of this resource are saved into
        file_fields: Upload slot -> allowed MIME subtypes
    """

    label: str
    folder: str
    model: type
    file_fields: Dict[FileField, Tuple[str, ...]]

    @abstractmethod
    def repository(self, uow: UnitOfWork) -> ICatalogRepository:
        pass

    @abstractmethod
    async def column_values(self, uow: UnitOfWork, command: BaseModel) -> Result[Dict[str, Any]]:
        """Validate a command and turn it into entity column values"""
        pass

    async def after_save(self, uow: UnitOfWork, entity, command: BaseModel) -> None:
        """Hook for rows kept outside the entity table"""
        return None

    @abstractmethod
    async def render_many(self, uow: UnitOfWork, entities: List[Any]) -> List[BaseModel]:
        pass

    async def render(self, uow: UnitOfWork, entity) -> BaseModel:
        return (await self.render_many(uow, [entity]))[0]

    def not_found(self) -> Error:
        return Error(
            f"{self.label.upper()}_NOT_FOUND", f"{self.label} not found!", ErrorKind.not_found
        )

    def name_taken(self) -> Error:
        return Error(
            f"{self.label.upper()}_ALREADY_EXISTS",
            f"{self.label} with given name already exists!",
            ErrorKind.conflict,
        )


class ToolResource(CatalogResource):
    label = "Tool"
    folder = "tools"
    model = Tool
    file_fields = {FileField.photo: IMAGE_SUBTYPES}

    def repository(self, uow: UnitOfWork) -> ICatalogRepository:
        return uow.tools

    async def column_values(self, uow: UnitOfWork, command: ToolCommand) -> Result[Dict[str, Any]]:
        links = parse_json_field("information_links", command.information_links, [])
        if links.is_err():
            return links
        return Return.ok(
            {
                "name": command.name,
                "description": command.description,
                "information_links": links.value,
            }
        )

    async def render_many(self, uow: UnitOfWork, entities: List[Tool]) -> List[ToolRead]:
        return [ToolRead.model_validate(entity) for entity in entities]


class TechniqueResource(CatalogResource):
    label = "Technique"
    folder = "techniques"
    model = Technique
    file_fields = {FileField.photo: IMAGE_SUBTYPES}

    def repository(self, uow: UnitOfWork) -> ICatalogRepository:
        return uow.techniques

    async def column_values(
        self, uow: UnitOfWork, command: TechniqueCommand
    ) -> Result[Dict[str, Any]]:
        links = parse_json_field("information_links", command.information_links, [])
        if links.is_err():
            return links
        return Return.ok(
            {
                "name": command.name,
                "description": command.description,
                "acronym": command.acronym,
                "information_links": links.value,
            }
        )

    async def render_many(self, uow: UnitOfWork, entities: List[Technique]) -> List[TechniqueRead]:
        return [TechniqueRead.model_validate(entity) for entity in entities]


class ManufacturerResource(CatalogResource):
    """Manufacturers link to the tools they make; links are replaced as a whole"""

    label = "Manufacturer"
    folder = "manufacturers"
    model = Manufacturer
    file_fields = {FileField.logo: IMAGE_SUBTYPES}

    def repository(self, uow: UnitOfWork) -> ICatalogRepository:
        return uow.manufacturers

    async def column_values(
        self, uow: UnitOfWork, command: ManufacturerCommand
    ) -> Result[Dict[str, Any]]:
        tool_ids = parse_id_list("tools", command.tools)
        if tool_ids.is_err():
            return tool_ids

        wanted = set(tool_ids.value)
        found = {tool.id for tool in await uow.tools.get_by_ids(list(wanted))}
        if wanted - found:
            return Return.err(Error("TOOL_NOT_FOUND", "Tool not found!", ErrorKind.not_found))

        return Return.ok({"name": command.name, "description": command.description})

    async def after_save(self, uow: UnitOfWork, entity: Manufacturer, command) -> None:
        await uow.manufacturers.replace_tools(entity.id, parse_id_list("tools", command.tools).value)

    async def render_many(
        self, uow: UnitOfWork, entities: List[Manufacturer]
    ) -> List[ManufacturerRead]:
        rendered = []
        for entity in entities:
            tools = await uow.tools.get_by_ids(await uow.manufacturers.get_tool_ids(entity.id))
            rendered.append(
                ManufacturerRead(
                    **ManufacturerSummary.model_validate(entity).model_dump(),
                    tools=[ToolRead.model_validate(tool) for tool in tools],
                )
            )
        return rendered


class ProductResource(CatalogResource):
    """Products reference one manufacturer and one tool (their type)"""

    label = "Product"
    folder = "products"
    model = Product
    file_fields = {FileField.photo: IMAGE_SUBTYPES, FileField.video: VIDEO_SUBTYPES}

    def repository(self, uow: UnitOfWork) -> ICatalogRepository:
        return uow.products

    async def column_values(
        self, uow: UnitOfWork, command: ProductCommand
    ) -> Result[Dict[str, Any]]:
        details = parse_json_field("details", command.details, [])
        if details.is_err():
            return details
        links = parse_json_field("information_links", command.information_links, [])
        if links.is_err():
            return links

        if await uow.manufacturers.get_by_id(command.manufacturer) is None:
            return Return.err(ManufacturerResource().not_found())
        if await uow.tools.get_by_id(command.type) is None:
            return Return.err(ToolResource().not_found())

        return Return.ok(
            {
                "name": command.name,
                "short_description": command.short_description,
                "long_description": command.long_description,
                "details": details.value,
                "information_links": links.value,
                "manufacturer_id": command.manufacturer,
                "tool_id": command.type,
            }
        )

    async def render_many(self, uow: UnitOfWork, entities: List[Product]) -> List[ProductRead]:
        manufacturers = {
            m.id: m
            for m in await uow.manufacturers.get_by_ids(
                list({entity.manufacturer_id for entity in entities})
            )
        }
        tools = {
            t.id: t for t in await uow.tools.get_by_ids(list({entity.tool_id for entity in entities}))
        }

        rendered = []
        for entity in entities:
            manufacturer = manufacturers.get(entity.manufacturer_id)
            tool = tools.get(entity.tool_id)
            rendered.append(
                ProductRead(
                    id=entity.id,
                    name=entity.name,
                    short_description=entity.short_description,
                    long_description=entity.long_description,
                    photo=entity.photo,
                    video=entity.video,
                    details=entity.details or [],
                    information_links=entity.information_links or [],
                    is_active=entity.is_active,
                    is_deleted=entity.is_deleted,
                    created_at=entity.created_at,
                    created_by=entity.created_by,
                    last_edit_at=entity.last_edit_at,
                    last_edit_by=entity.last_edit_by,
                    manufacturer=ManufacturerSummary.model_validate(manufacturer)
                    if manufacturer
                    else None,
                    type=ToolRead.model_validate(tool) if tool else None,
                )
            )
        return rendered


MANUFACTURERS = ManufacturerResource()
TOOLS = ToolResource()
TECHNIQUES = TechniqueResource()
PRODUCTS = ProductResource()
