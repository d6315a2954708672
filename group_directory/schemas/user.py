from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    username: str = Field(min_length=1)


class UserCreate(UserBase):
    password: str = Field(min_length=1)


class UserRead(UserBase):
    id: UUID

    model_config = ConfigDict(from_attributes=True)
