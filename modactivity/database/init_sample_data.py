"""Sample data initialization for non-production environments.

Seeds a development database with enough moderation history to exercise every
part of the activity report:

- Staff moderators, plus a former moderator who is no longer staff
- Moderation actions spread over the current and previous month, including
  `name_change_manual` entries that the report ignores
- User reports in every status, some reviewed in a later day than created

Idempotent: does nothing if moderation actions already exist.
"""

import random
from datetime import datetime, timedelta
from typing import cast
from dateutil.relativedelta import relativedelta
from loguru import logger
from sqlmodel import Session, select

from modactivity.core.config import get_settings
from modactivity.core.security import generate_staff_secret
from modactivity.models.enums import ModerationActionType, ReportStatus
from modactivity.models.moderation_log import ModerationLog
from modactivity.models.report import Report
from modactivity.models.user import User

SAMPLE_MODERATORS = [
    ("mira", True),
    ("oskar", True),
    ("juno", True),
    ("former_mod", False),
]
SAMPLE_MEMBERS = ["alice", "bob", "carol", "dave", "erin"]
SAMPLE_ACTIONS = [
    ModerationActionType.WARN,
    ModerationActionType.WARN,
    ModerationActionType.MUTE,
    ModerationActionType.KICK,
    ModerationActionType.BAN,
    ModerationActionType.NOTE,
    ModerationActionType.NAME_CHANGE_MANUAL,
]


def _get_or_create_user(session: Session, username: str, staff: bool) -> User:
    user = session.exec(select(User).where(User.username == username)).first()
    if user:
        return user
    user = User(
        username=username,
        email=f"{username}@example.com",
        staff=staff,
        secret=generate_staff_secret() if staff else None,
    )
    session.add(user)
    session.flush()
    return user


def _random_moment(rng: random.Random, start: datetime, end: datetime) -> datetime:
    span = int((end - start).total_seconds())
    return start + timedelta(seconds=rng.randrange(span))


def init_sample_data(session: Session, seed: int = 42) -> None:
    """
    Populate the database with sample moderators, actions and reports.

    Parameters:
        session (Session): Database session used for all inserts; committed once at the end.
        seed (int): Seed for the random generator so the sample set is reproducible.

    Raises:
        RuntimeError: If called with ENVIRONMENT set to "production".
    """
    if get_settings().ENVIRONMENT.lower() == "production":
        raise RuntimeError("Refusing to seed sample data in production")

    if session.exec(select(ModerationLog)).first():
        logger.info("Sample moderation data already present. Skipping.")
        return

    rng = random.Random(seed)
    now = datetime.now()
    start = cast(datetime, datetime(now.year, now.month, 1) - relativedelta(months=1))

    moderators = [_get_or_create_user(session, n, s) for n, s in SAMPLE_MODERATORS]
    members = [_get_or_create_user(session, n, False) for n in SAMPLE_MEMBERS]

    for _ in range(120):
        moderator = rng.choice(moderators)
        target = rng.choice(members)
        session.add(
            ModerationLog(
                moderator_id=moderator.id_user,
                moderator_username=moderator.username,
                action_type=rng.choice(SAMPLE_ACTIONS).value,
                id_user_target=target.id_user,
                created_at=_random_moment(rng, start, now),
            )
        )

    for i in range(60):
        reporter, reported = rng.sample(members, 2)
        created_at = _random_moment(rng, start, now)
        status = rng.choice(list(ReportStatus))
        reviewed_at = None
        if status != ReportStatus.PENDING:
            reviewed_at = min(now, created_at + timedelta(hours=rng.randint(1, 72)))
        session.add(
            Report(
                type="spam" if i % 3 == 0 else "harassment",
                reason=f"Sample report #{i}",
                id_user_reporter=reporter.id_user,
                id_user_reported=reported.id_user,
                status=status,
                created_at=created_at,
                reviewed_at=reviewed_at,
            )
        )

    session.commit()
    logger.info(
        f"Seeded {len(moderators)} moderators, {len(members)} members, "
        "120 moderation actions and 60 reports"
    )
    staff_names = ", ".join(m.username for m in moderators if m.staff)
    logger.info(f"Staff accounts with a shared secret: {staff_names}")
