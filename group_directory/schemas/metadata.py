from pydantic import BaseModel

from group_directory.schemas.group import CamelModel


class MetadataRequest(BaseModel):
    url: str = ""


class MetadataRead(CamelModel):
    title: str
    image_url: str
