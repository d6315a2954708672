from fastapi import APIRouter

from group_directory.api.v1 import groups, metadata, stats

api_router = APIRouter(prefix="/api")
api_router.include_router(groups.router)
api_router.include_router(metadata.router)
api_router.include_router(stats.router)

__all__ = ["api_router"]
