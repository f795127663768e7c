"""
Startup Use Cases

Idempotent seeding run from the application lifespan.
"""

from .seed_admins_use_case import AdminSeed, SeedAdminsUseCase
from .seed_roles_use_case import SeedRolesUseCase

__all__ = [
    "SeedRolesUseCase",
    "SeedAdminsUseCase",
    "AdminSeed",
]
