from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

WHATSAPP_INVITE_MARKER = "chat.whatsapp.com"


class Category(str, Enum):
    TECHNOLOGY = "technology"
    BUSINESS = "business"
    EDUCATION = "education"
    GAMING = "gaming"
    ENTERTAINMENT = "entertainment"
    LIFESTYLE = "lifestyle"
    NEWS = "news"
    SPORTS = "sports"
    HEALTH = "health"
    TRAVEL = "travel"
    FOOD = "food"
    MUSIC = "music"


class Country(str, Enum):
    US = "US"
    IN = "IN"
    UK = "UK"
    CA = "CA"
    AU = "AU"
    DE = "DE"
    FR = "FR"
    BR = "BR"
    JP = "JP"
    KR = "KR"
    MX = "MX"
    IT = "IT"
    ES = "ES"
    NL = "NL"
    SG = "SG"
    AE = "AE"


class GroupSort(str, Enum):
    NEWEST = "newest"
    POPULAR = "popular"
    ALPHABETICAL = "alphabetical"


def is_whatsapp_invite(link: Optional[str]) -> bool:
    return bool(link) and WHATSAPP_INVITE_MARKER in link


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GroupBase(CamelModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    whatsapp_link: str = Field(min_length=1)
    image_url: Optional[str] = None


class GroupCreate(GroupBase):
    category: Category
    country: Country


class GroupRead(GroupBase):
    id: UUID
    category: str
    country: str
    view_count: int
    created_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class ViewAck(BaseModel):
    success: bool = True


class StatsRead(CamelModel):
    total_groups: int
    total_categories: int
    total_countries: int
