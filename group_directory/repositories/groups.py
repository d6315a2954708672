"""
Group storage.

Every listing a store returns is ordered by ``created_at`` descending
(newest first). Callers that want another order re-sort the result.
Category and country values are compared as plain strings; an unknown
value matches nothing.
"""
import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from uuid import UUID, uuid4

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql import Select

from group_directory.models.group import WhatsappGroup, utcnow
from group_directory.schemas.group import GroupCreate

log = logging.getLogger("group_directory.storage")


class GroupStore(ABC):
    @abstractmethod
    async def create(self, data: GroupCreate) -> WhatsappGroup:
        """Persist a new group with a fresh id, zero views and the current time."""

    @abstractmethod
    async def get_by_id(self, group_id: UUID | str) -> WhatsappGroup | None:
        """Return the group, or None when no group has that id."""

    @abstractmethod
    async def list_all(self) -> list[WhatsappGroup]: ...

    @abstractmethod
    async def list_by_category(self, category: str) -> list[WhatsappGroup]: ...

    @abstractmethod
    async def list_by_country(self, country: str) -> list[WhatsappGroup]: ...

    @abstractmethod
    async def search(self, query: str) -> list[WhatsappGroup]:
        """Case-insensitive substring match on title or description."""

    @abstractmethod
    async def increment_view(self, group_id: UUID | str) -> bool:
        """
        Add one to the group's view count.

        An unknown or malformed id is a no-op, not an error. Returns whether
        a group was updated.
        """


def _as_uuid(group_id: UUID | str) -> UUID | None:
    if isinstance(group_id, UUID):
        return group_id
    try:
        return UUID(group_id)
    except (TypeError, ValueError):
        return None


def _build_group(data: GroupCreate) -> WhatsappGroup:
    return WhatsappGroup(
        id=uuid4(),
        title=data.title,
        description=data.description,
        whatsapp_link=data.whatsapp_link,
        category=data.category.value,
        country=data.country.value,
        image_url=data.image_url or None,
        view_count=0,
        created_at=utcnow(),
    )


def _detached_copy(group: WhatsappGroup) -> WhatsappGroup:
    return WhatsappGroup(
        **{
            column.key: getattr(group, column.key)
            for column in WhatsappGroup.__table__.columns
        }
    )


class InMemoryGroupStore(GroupStore):
    """
    Volatile store keeping groups in a dict, for tests and demos.

    Callers get copies; the stored records change only through
    ``increment_view``.
    """

    def __init__(self) -> None:
        self._groups: dict[UUID, WhatsappGroup] = {}
        self._lock = asyncio.Lock()

    def _newest_first(
        self, predicate: Callable[[WhatsappGroup], bool] | None = None
    ) -> list[WhatsappGroup]:
        # Reversed insertion order so that equal timestamps still list the
        # most recently created group first; sorted() is stable.
        groups: Iterable[WhatsappGroup] = reversed(list(self._groups.values()))
        if predicate is not None:
            groups = filter(predicate, groups)
        ordered = sorted(groups, key=lambda group: group.created_at, reverse=True)
        return [_detached_copy(group) for group in ordered]

    async def create(self, data: GroupCreate) -> WhatsappGroup:
        group = _build_group(data)
        async with self._lock:
            self._groups[group.id] = group
        log.info("Created group %s in %s", group.id, group.category)
        return _detached_copy(group)

    async def get_by_id(self, group_id: UUID | str) -> WhatsappGroup | None:
        group = self._groups.get(_as_uuid(group_id))
        return _detached_copy(group) if group is not None else None

    async def list_all(self) -> list[WhatsappGroup]:
        return self._newest_first()

    async def list_by_category(self, category: str) -> list[WhatsappGroup]:
        return self._newest_first(lambda group: group.category == category)

    async def list_by_country(self, country: str) -> list[WhatsappGroup]:
        return self._newest_first(lambda group: group.country == country)

    async def search(self, query: str) -> list[WhatsappGroup]:
        needle = query.lower()
        return self._newest_first(
            lambda group: needle in group.title.lower()
            or needle in group.description.lower()
        )

    async def increment_view(self, group_id: UUID | str) -> bool:
        async with self._lock:
            group = self._groups.get(_as_uuid(group_id))
            if group is None:
                log.debug("View for unknown group %s ignored", group_id)
                return False
            group.view_count += 1
        return True


class SqlAlchemyGroupStore(GroupStore):
    """Store backed by the ``whatsapp_groups`` table, one session per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def _fetch(self, statement: Select) -> list[WhatsappGroup]:
        statement = statement.order_by(WhatsappGroup.created_at.desc())
        async with self._session_factory() as session:
            result = await session.execute(statement)
            return list(result.scalars().all())

    async def create(self, data: GroupCreate) -> WhatsappGroup:
        group = _build_group(data)
        async with self._session_factory() as session:
            session.add(group)
            await session.commit()
            await session.refresh(group)
        log.info("Created group %s in %s", group.id, group.category)
        return group

    async def get_by_id(self, group_id: UUID | str) -> WhatsappGroup | None:
        key = _as_uuid(group_id)
        if key is None:
            return None
        async with self._session_factory() as session:
            return await session.get(WhatsappGroup, key)

    async def list_all(self) -> list[WhatsappGroup]:
        return await self._fetch(select(WhatsappGroup))

    async def list_by_category(self, category: str) -> list[WhatsappGroup]:
        return await self._fetch(
            select(WhatsappGroup).where(WhatsappGroup.category == category)
        )

    async def list_by_country(self, country: str) -> list[WhatsappGroup]:
        return await self._fetch(
            select(WhatsappGroup).where(WhatsappGroup.country == country)
        )

    async def search(self, query: str) -> list[WhatsappGroup]:
        return await self._fetch(
            select(WhatsappGroup).where(
                WhatsappGroup.title.icontains(query, autoescape=True)
                | WhatsappGroup.description.icontains(query, autoescape=True)
            )
        )

    async def increment_view(self, group_id: UUID | str) -> bool:
        key = _as_uuid(group_id)
        if key is None:
            log.debug("View for malformed group id %r ignored", group_id)
            return False
        statement = (
            update(WhatsappGroup)
            .where(WhatsappGroup.id == key)
            .values(view_count=WhatsappGroup.view_count + 1)
        )
        async with self._session_factory() as session:
            result = await session.execute(statement)
            await session.commit()
        if result.rowcount == 0:
            log.debug("View for unknown group %s ignored", group_id)
            return False
        return True
