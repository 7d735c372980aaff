from enum import Enum


class ReportStatus(str, Enum):
    PENDING = "pending"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


class ModerationActionType(str, Enum):
    """Well-known moderation action tags.

    ``ModerationLog.action_type`` is a free-form string; this enum lists the
    values the moderation tools emit today.
    """

    WARN = "warn"
    MUTE = "mute"
    KICK = "kick"
    BAN = "ban"
    UNBAN = "unban"
    NOTE = "note"
    REPORT_RESOLVE = "report_resolve"
    REPORT_DISMISS = "report_dismiss"
    NAME_CHANGE_MANUAL = "name_change_manual"
