from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from group_directory.api.deps import get_group_store
from group_directory.models import WhatsappGroup
from group_directory.repositories import GroupStore
from group_directory.schemas import (
    GroupCreate,
    GroupRead,
    GroupSort,
    ViewAck,
    is_whatsapp_invite,
)

router = APIRouter(prefix="/groups", tags=["groups"])


def sort_groups(
    groups: list[WhatsappGroup], sort: Optional[str]
) -> list[WhatsappGroup]:
    """Re-order a newest-first listing; unknown sort keys keep it as is."""
    if sort == GroupSort.POPULAR:
        groups.sort(key=lambda group: group.view_count, reverse=True)
    elif sort == GroupSort.ALPHABETICAL:
        groups.sort(key=lambda group: group.title.casefold())
    return groups


@router.get("", response_model=list[GroupRead])
async def list_groups(
    store: Annotated[GroupStore, Depends(get_group_store)],
    search: Optional[str] = None,
    category: Optional[str] = None,
    country: Optional[str] = None,
    sort: Optional[str] = None,
) -> list[GroupRead]:
    """List groups, narrowed by search, else category, else country."""
    if search:
        groups = await store.search(search)
    elif category:
        groups = await store.list_by_category(category)
    elif country:
        groups = await store.list_by_country(country)
    else:
        groups = await store.list_all()

    return [GroupRead.model_validate(group) for group in sort_groups(groups, sort)]


@router.post("", response_model=GroupRead, status_code=status.HTTP_201_CREATED)
async def create_group(
    payload: GroupCreate,
    store: Annotated[GroupStore, Depends(get_group_store)],
) -> GroupRead:
    """Submit a new group. The link must be a WhatsApp chat invite."""
    if not is_whatsapp_invite(payload.whatsapp_link):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid WhatsApp link format",
        )
    group = await store.create(payload)
    return GroupRead.model_validate(group)


@router.get("/{group_id}", response_model=GroupRead)
async def get_group(
    group_id: str,
    store: Annotated[GroupStore, Depends(get_group_store)],
) -> GroupRead:
    group = await store.get_by_id(group_id)
    if not group:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Group not found"
        )
    return GroupRead.model_validate(group)


@router.post("/{group_id}/view", response_model=ViewAck)
async def record_view(
    group_id: str,
    store: Annotated[GroupStore, Depends(get_group_store)],
) -> ViewAck:
    """Count a view. Acknowledged even when the group does not exist."""
    await store.increment_view(group_id)
    return ViewAck()
