from group_directory.models.base import Base
from group_directory.models.group import WhatsappGroup
from group_directory.models.user import User

__all__ = ["Base", "User", "WhatsappGroup"]
