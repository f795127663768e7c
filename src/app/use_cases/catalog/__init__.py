"""
Catalog Use Cases

Generic CRUD over manufacturers, tools, techniques and products. Each use
case takes a CatalogResource describing the resource it works on.
"""

from .create_catalog_item_use_case import CreateCatalogItemUseCase
from .delete_catalog_item_use_case import DeleteCatalogItemUseCase
from .dtos import (
    FileUpload,
    ManufacturerCommand,
    ManufacturerRead,
    ProductCommand,
    ProductRead,
    TechniqueCommand,
    TechniqueRead,
    ToolCommand,
    ToolRead,
)
from .get_catalog_item_use_case import GetCatalogItemUseCase
from .list_catalog_use_case import ListCatalogUseCase
from .resources import (
    MANUFACTURERS,
    PRODUCTS,
    TECHNIQUES,
    TOOLS,
    CatalogResource,
)
from .update_catalog_item_use_case import UpdateCatalogItemUseCase

__all__ = [
    # Use Cases
    "ListCatalogUseCase",
    "GetCatalogItemUseCase",
    "CreateCatalogItemUseCase",
    "UpdateCatalogItemUseCase",
    "DeleteCatalogItemUseCase",
    # Resources
    "CatalogResource",
    "MANUFACTURERS",
    "TOOLS",
    "TECHNIQUES",
    "PRODUCTS",
    # DTOs
    "FileUpload",
    "ToolCommand",
    "TechniqueCommand",
    "ManufacturerCommand",
    "ProductCommand",
    "ToolRead",
    "TechniqueRead",
    "ManufacturerRead",
    "ProductRead",
]
