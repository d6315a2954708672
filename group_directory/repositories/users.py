from abc import ABC, abstractmethod
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from group_directory.models.user import User
from group_directory.schemas.user import UserCreate


class UserStore(ABC):
    @abstractmethod
    async def create(self, data: UserCreate) -> User: ...

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> User | None: ...

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None: ...


class InMemoryUserStore(UserStore):
    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}

    async def create(self, data: UserCreate) -> User:
        user = User(id=uuid4(), username=data.username, password=data.password)
        self._users[user.id] = user
        return user

    async def get_by_id(self, user_id: UUID) -> User | None:
        return self._users.get(user_id)

    async def get_by_username(self, username: str) -> User | None:
        return next(
            (user for user in self._users.values() if user.username == username),
            None,
        )


class SqlAlchemyUserStore(UserStore):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, data: UserCreate) -> User:
        user = User(id=uuid4(), username=data.username, password=data.password)
        async with self._session_factory() as session:
            session.add(user)
            await session.commit()
            await session.refresh(user)
        return user

    async def get_by_id(self, user_id: UUID) -> User | None:
        async with self._session_factory() as session:
            return await session.get(User, user_id)

    async def get_by_username(self, username: str) -> User | None:
        async with self._session_factory() as session:
            result = await session.execute(
                select(User).where(User.username == username)
            )
            return result.scalar_one_or_none()
