from datetime import datetime
from sqlmodel import SQLModel, Field
from modactivity.models.enums import ReportStatus


class ReportBase(SQLModel):
    type: str | None = Field(default=None, max_length=50)
    reason: str
    id_user_reporter: int = Field(foreign_key="user.id_user")
    id_user_reported: int = Field(foreign_key="user.id_user")


class Report(ReportBase, table=True):
    id_report: int | None = Field(default=None, primary_key=True)
    status: ReportStatus = Field(default=ReportStatus.PENDING, index=True)
    created_at: datetime = Field(default_factory=datetime.now, index=True)
    # Set once, when the report leaves PENDING
    reviewed_at: datetime | None = Field(default=None, index=True)
