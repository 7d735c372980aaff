"""Request and response schemas for the moderation activity report."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys, populated by field name."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class ModActivityRequest(BaseModel):
    secret: str = Field(min_length=1)
    year: int | None = None
    month: int | None = None


class ModeratorSummary(CamelModel):
    """Per-moderator action counts for the requested month."""

    account_id: int
    display_name: str
    actions: dict[str, int]
    total_actions: int


class DailyReportFlow(CamelModel):
    day: int
    incoming: int
    handled: int


class AvailableMonth(CamelModel):
    year: int
    month: int


class ModActivityReport(CamelModel):
    """Monthly moderation activity report.

    Attributes:
        moderators: Staff moderators with at least one counted action, busiest first.
        totals: Action counts per action type across ``moderators``.
        grand_total: Sum of ``total_actions`` across ``moderators``.
        daily_reports: One entry per calendar day, day 1 first.
        daily_by_moderator: Per-moderator action counts, index 0 is day 1.
        month: Month the report covers (1-12).
        year: Year the report covers.
        available_months: Every (year, month) with counted actions, most recent first.
    """

    moderators: list[ModeratorSummary]
    totals: dict[str, int]
    grand_total: int
    daily_reports: list[DailyReportFlow]
    daily_by_moderator: dict[int, list[int]]
    month: int
    year: int
    available_months: list[AvailableMonth]
