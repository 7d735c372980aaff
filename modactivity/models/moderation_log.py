from datetime import datetime
from typing import TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship

if TYPE_CHECKING:
    from modactivity.models.user import User


class ModerationLogBase(SQLModel):
    moderator_id: int = Field(foreign_key="user.id_user", index=True)
    # Display name as it was when the action was taken
    moderator_username: str = Field(max_length=50)
    action_type: str = Field(max_length=50, index=True)
    id_user_target: int | None = Field(default=None, foreign_key="user.id_user")
    reason: str | None = Field(default=None, max_length=500)


class ModerationLog(ModerationLogBase, table=True):
    __tablename__ = "moderation_log"  # type: ignore[assignment]

    id_log: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=datetime.now, index=True)
    moderator: "User" = Relationship(
        back_populates="moderation_actions",
        sa_relationship_kwargs={"foreign_keys": "[ModerationLog.moderator_id]"},
    )
