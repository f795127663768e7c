"""
Catalog Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import FileField, RoleNumber, IMAGE_SUBTYPES, VIDEO_SUBTYPES

# Export all entities
from .role import Role
from .account import Account
from .confirmation_challenge import ConfirmationChallenge
from .reset_challenge import ResetChallenge
from .tool import Tool
from .technique import Technique
from .manufacturer import Manufacturer, ManufacturerTool
from .product import Product

__all__ = [
    # Enums
    "FileField",
    "RoleNumber",
    "IMAGE_SUBTYPES",
    "VIDEO_SUBTYPES",
    # Entities
    "Role",
    "Account",
    "ConfirmationChallenge",
    "ResetChallenge",
    "Tool",
    "Technique",
    "Manufacturer",
    "ManufacturerTool",
    "Product",
]
