"""Monthly moderation activity report.

Turns the moderation action log and the user report log into per-moderator
totals, daily report flow, per-moderator daily series and the index of months
with recorded activity.

Each aggregation is a plain synchronous query over its own session. The async
builder runs them on worker threads and merges the results once all of them
have completed; any database failure fails the whole build.
"""

import asyncio
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime
from typing import Any, TypeVar, cast

from anyio import to_thread
from loguru import logger
from sqlalchemy import Engine, extract
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, func, select

from modactivity.exceptions import AggregationError
from modactivity.models.enums import ModerationActionType, ReportStatus
from modactivity.models.mod_activity import (
    AvailableMonth,
    DailyReportFlow,
    ModActivityReport,
    ModeratorSummary,
)
from modactivity.models.moderation_log import ModerationLog
from modactivity.models.report import Report
from modactivity.models.user import User
from modactivity.services.period import (
    days_in_month,
    densify,
    month_bounds,
    validate_period,
)

T = TypeVar("T")

# Never counted anywhere in the report
EXCLUDED_ACTION_TYPES = (ModerationActionType.NAME_CHANGE_MANUAL.value,)


def _is_counted_action():
    return col(ModerationLog.action_type).not_in(EXCLUDED_ACTION_TYPES)


# ---------------------------------------------------------------------------
# Aggregation queries (one session each)
# ---------------------------------------------------------------------------


def get_moderator_action_counts(
    session: Session, start: datetime, end: datetime
) -> list[tuple[int, str, str, int]]:
    """
    Count counted actions per (moderator, action type) inside [start, end).

    Returns:
        list[tuple[int, str, str, int]]: Rows of (moderator_id, display name,
            action_type, count) ordered by moderator_id then action_type.
    """
    statement = (
        select(
            ModerationLog.moderator_id,
            func.max(ModerationLog.moderator_username),
            ModerationLog.action_type,
            func.count(),
        )
        .where(
            ModerationLog.created_at >= start,
            ModerationLog.created_at < end,
            _is_counted_action(),
        )
        .group_by(ModerationLog.moderator_id, ModerationLog.action_type)
        .order_by(ModerationLog.moderator_id, ModerationLog.action_type)  # type: ignore
    )
    rows = session.exec(statement).all()
    return [
        (moderator_id, username, action_type, count)
        for moderator_id, username, action_type, count in rows
    ]


def get_staff_ids(session: Session, user_ids: Iterable[int]) -> set[int]:
    """
    Return the subset of `user_ids` currently flagged as staff.

    Staff status is read at call time, not at the time the actions were logged.
    """
    ids = list(user_ids)
    if not ids:
        return set()
    statement = select(User.id_user).where(
        col(User.id_user).in_(ids), col(User.staff).is_(True)
    )
    return {user_id for user_id in session.exec(statement).all() if user_id is not None}


def _count_by_day(
    session: Session, column: Any, start: datetime, end: datetime, *criteria: Any
) -> dict[int, int]:
    day = extract("day", column)
    statement = (
        select(day, func.count())
        .where(column >= start, column < end, *criteria)
        .group_by(day)
    )
    return {int(d): count for d, count in session.exec(statement).all()}


def get_daily_incoming_reports(
    session: Session, start: datetime, end: datetime
) -> dict[int, int]:
    """Reports created per day of month, whatever their status."""
    return _count_by_day(session, Report.created_at, start, end)


def get_daily_handled_reports(
    session: Session, start: datetime, end: datetime
) -> dict[int, int]:
    """Reports reviewed per day of month, excluding those still pending."""
    return _count_by_day(
        session,
        Report.reviewed_at,
        start,
        end,
        Report.status != ReportStatus.PENDING,
    )


def get_daily_actions_by_moderator(
    session: Session, start: datetime, end: datetime
) -> dict[int, dict[int, int]]:
    """
    Count counted actions per moderator and day of month inside [start, end).

    Returns:
        dict[int, dict[int, int]]: moderator_id -> {day: count}, sparse.
    """
    day = extract("day", ModerationLog.created_at)
    statement = (
        select(ModerationLog.moderator_id, day, func.count())
        .where(
            ModerationLog.created_at >= start,
            ModerationLog.created_at < end,
            _is_counted_action(),
        )
        .group_by(ModerationLog.moderator_id, day)
    )
    per_moderator: dict[int, dict[int, int]] = {}
    for moderator_id, d, count in session.exec(statement).all():
        per_moderator.setdefault(moderator_id, {})[int(d)] = count
    return per_moderator


def get_available_months(session: Session) -> list[tuple[int, int]]:
    """
    List every (year, month) holding at least one counted action, across all time.

    Returns:
        list[tuple[int, int]]: Distinct (year, month) pairs, most recent first.
    """
    year = extract("year", ModerationLog.created_at)
    month = extract("month", ModerationLog.created_at)
    statement = (
        select(year, month)
        .where(_is_counted_action())
        .group_by(year, month)
        .order_by(year.desc(), month.desc())
    )
    return [(int(y), int(m)) for y, m in session.exec(statement).all()]


# ---------------------------------------------------------------------------
# Reshaping
# ---------------------------------------------------------------------------


def summarize_moderators(
    rows: Sequence[tuple[int, str, str, int]],
) -> list[ModeratorSummary]:
    """
    Fold (moderator, action type) counts into one summary per moderator.

    The last display name seen for a moderator wins. Summaries are ordered by
    total actions descending, ties broken by moderator id ascending.
    """
    names: dict[int, str] = {}
    actions: dict[int, dict[str, int]] = {}
    for moderator_id, username, action_type, count in rows:
        names[moderator_id] = username
        counts = actions.setdefault(moderator_id, {})
        counts[action_type] = counts.get(action_type, 0) + count

    summaries = [
        ModeratorSummary(
            account_id=moderator_id,
            display_name=names[moderator_id],
            actions=counts,
            total_actions=sum(counts.values()),
        )
        for moderator_id, counts in actions.items()
    ]
    summaries.sort(key=lambda s: (-s.total_actions, s.account_id))
    return summaries


def sum_action_totals(moderators: Iterable[ModeratorSummary]) -> dict[str, int]:
    totals: dict[str, int] = {}
    for moderator in moderators:
        for action_type, count in moderator.actions.items():
            totals[action_type] = totals.get(action_type, 0) + count
    return dict(sorted(totals.items()))


def build_daily_reports(
    incoming: dict[int, int], handled: dict[int, int], days: int
) -> list[DailyReportFlow]:
    return [
        DailyReportFlow(day=day, incoming=incoming_count, handled=handled_count)
        for day, (incoming_count, handled_count) in enumerate(
            zip(densify(incoming, days), densify(handled, days)), start=1
        )
    ]


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


async def _run_query(engine: Engine, query: Callable[..., T], *args) -> T:
    def _in_own_session() -> T:
        with Session(engine) as session:
            return query(session, *args)

    return await to_thread.run_sync(_in_own_session)


async def build_mod_activity(
    engine: Engine, year: int, month: int
) -> ModActivityReport:
    """
    Build the moderation activity report for a resolved (year, month).

    Only moderators currently flagged as staff are reported, whatever their
    status when they acted. Actions tagged `name_change_manual` never count.

    Parameters:
        engine: Engine the aggregation sessions are opened on.
        year: Report year.
        month: Report month (1-12).

    Returns:
        ModActivityReport: The assembled report.

    Raises:
        ValidationError: If year or month is out of range.
        AggregationError: If any underlying query fails; no partial report is returned.
    """
    validate_period(year, month)
    start, end = month_bounds(year, month)
    days = days_in_month(year, month)

    try:
        # Every query is awaited to completion; the first failure in call order wins
        results = await asyncio.gather(
            _run_query(engine, get_moderator_action_counts, start, end),
            _run_query(engine, get_daily_incoming_reports, start, end),
            _run_query(engine, get_daily_handled_reports, start, end),
            _run_query(engine, get_daily_actions_by_moderator, start, end),
            _run_query(engine, get_available_months),
            return_exceptions=True,
        )
        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            if len(failures) > 1:
                logger.warning(
                    f"{len(failures)} mod activity queries failed for {year}-{month:02d}"
                )
            raise failures[0]
        action_rows, incoming, handled, daily_actions, months = cast(
            tuple[
                list[tuple[int, str, str, int]],
                dict[int, int],
                dict[int, int],
                dict[int, dict[int, int]],
                list[tuple[int, int]],
            ],
            tuple(results),
        )
        summaries = summarize_moderators(action_rows)
        staff_ids = await _run_query(
            engine, get_staff_ids, [s.account_id for s in summaries]
        )
    except SQLAlchemyError as e:
        logger.exception(f"Mod activity aggregation failed for {year}-{month:02d}")
        raise AggregationError(str(e)) from e

    moderators = [s for s in summaries if s.account_id in staff_ids]
    dropped = len(summaries) - len(moderators)
    if dropped:
        logger.debug(f"Dropped {dropped} non-staff moderator(s) from {year}-{month:02d}")

    report = ModActivityReport(
        moderators=moderators,
        totals=sum_action_totals(moderators),
        grand_total=sum(m.total_actions for m in moderators),
        daily_reports=build_daily_reports(incoming, handled, days),
        daily_by_moderator={
            moderator_id: densify(counts, days)
            for moderator_id, counts in sorted(daily_actions.items())
            if moderator_id in staff_ids
        },
        month=month,
        year=year,
        available_months=[AvailableMonth(year=y, month=m) for y, m in months],
    )
    logger.info(
        f"Built mod activity for {year}-{month:02d}: "
        f"{len(moderators)} moderator(s), {report.grand_total} action(s)"
    )
    return report
