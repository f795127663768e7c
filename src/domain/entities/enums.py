"""
Catalog Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum, IntEnum


class RoleNumber(IntEnum):
    """Numeric role tier stored on Role.number and embedded in sessions"""

    ADMIN = 1
    USER = 2


class FileField(str, Enum):
    """Upload slots a catalog entity can carry"""

    photo = "photo"
    video = "video"
    logo = "logo"


IMAGE_SUBTYPES = ("jpeg", "jpg", "png")
VIDEO_SUBTYPES = (
    "x-flv",
    "mp4",
    "x-mpegURL",
    "MP2T",
    "3gpp",
    "quicktime",
    "x-msvideo",
    "x-ms-wmv",
)
