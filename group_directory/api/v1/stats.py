from typing import Annotated

from fastapi import APIRouter, Depends

from group_directory.api.deps import get_group_store
from group_directory.repositories import GroupStore
from group_directory.schemas import StatsRead
from group_directory.services.stats import compute_stats

router = APIRouter(tags=["stats"])


@router.get("/stats", response_model=StatsRead)
async def get_stats(
    store: Annotated[GroupStore, Depends(get_group_store)],
) -> StatsRead:
    return compute_stats(await store.list_all())
