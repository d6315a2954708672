from group_directory.repositories.groups import (
    GroupStore,
    InMemoryGroupStore,
    SqlAlchemyGroupStore,
)
from group_directory.repositories.users import (
    InMemoryUserStore,
    SqlAlchemyUserStore,
    UserStore,
)

__all__ = [
    "GroupStore",
    "InMemoryGroupStore",
    "InMemoryUserStore",
    "SqlAlchemyGroupStore",
    "SqlAlchemyUserStore",
    "UserStore",
]
