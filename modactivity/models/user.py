from datetime import datetime
from typing import TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship

if TYPE_CHECKING:
    from modactivity.models.moderation_log import ModerationLog


class UserBase(SQLModel):
    username: str = Field(unique=True, index=True)
    email: str = Field(unique=True, index=True)
    staff: bool = Field(default=False, index=True)


class User(UserBase, table=True):
    id_user: int | None = Field(default=None, primary_key=True)
    # Shared secret presented by staff tooling; looked up as-is
    secret: str | None = Field(default=None, unique=True, index=True, max_length=128)
    date_creation: datetime = Field(default_factory=datetime.now)
    moderation_actions: list["ModerationLog"] = Relationship(
        back_populates="moderator",
        sa_relationship_kwargs={"foreign_keys": "[ModerationLog.moderator_id]"},
    )
