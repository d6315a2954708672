from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from group_directory.api.deps import get_metadata_service
from group_directory.schemas import MetadataRead, MetadataRequest, is_whatsapp_invite
from group_directory.services.metadata import MetadataService

router = APIRouter(tags=["metadata"])


@router.post("/extract-metadata", response_model=MetadataRead)
async def extract_metadata(
    payload: MetadataRequest,
    service: Annotated[MetadataService, Depends(get_metadata_service)],
) -> MetadataRead:
    """Suggest a title and image for a group invite link."""
    if not is_whatsapp_invite(payload.url):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid WhatsApp link"
        )
    return await service.extract(payload.url)
