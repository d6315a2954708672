from fastapi import Request

from group_directory.repositories import GroupStore, UserStore
from group_directory.services.metadata import MetadataService


async def get_group_store(request: Request) -> GroupStore:
    return request.app.state.group_store


async def get_metadata_service() -> MetadataService:
    return MetadataService()


async def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store
