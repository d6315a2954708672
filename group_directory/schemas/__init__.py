from group_directory.schemas.group import (
    Category,
    Country,
    GroupCreate,
    GroupRead,
    GroupSort,
    StatsRead,
    ViewAck,
    is_whatsapp_invite,
)
from group_directory.schemas.metadata import MetadataRead, MetadataRequest
from group_directory.schemas.user import UserCreate, UserRead

__all__ = [
    "Category",
    "Country",
    "GroupCreate",
    "GroupRead",
    "GroupSort",
    "MetadataRead",
    "MetadataRequest",
    "StatsRead",
    "UserCreate",
    "UserRead",
    "ViewAck",
    "is_whatsapp_invite",
]
