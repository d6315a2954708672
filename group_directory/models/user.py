from uuid import UUID, uuid4

from sqlalchemy.orm import Mapped, mapped_column

from group_directory.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    username: Mapped[str] = mapped_column(unique=True, index=True)
    password: Mapped[str]
