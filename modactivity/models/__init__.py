"""Table models, imported here so they register on ``SQLModel.metadata``."""

from modactivity.models.user import User
from modactivity.models.moderation_log import ModerationLog
from modactivity.models.report import Report

__all__ = ["User", "ModerationLog", "Report"]
