"""Shared fixtures for benchmark tests."""

from datetime import datetime, timedelta

import pytest
from sqlmodel import Session, create_engine, SQLModel
from sqlmodel.pool import StaticPool

from modactivity.models.enums import ModerationActionType, ReportStatus
from modactivity.models.moderation_log import ModerationLog
from modactivity.models.report import Report
from modactivity.models.user import User

ACTIONS = [t.value for t in ModerationActionType]


@pytest.fixture(name="session")
def session_fixture():
    """
    Create and yield a SQLModel Session bound to a fresh in-memory SQLite database.

    Yields:
        Session: A SQLModel Session connected to the created in-memory SQLite database; the session is closed when the fixture tears down.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="busy_month")
def busy_month_fixture(session: Session):
    """
    Seed April 2026 with 10 staff moderators, 2000 actions and 500 reports.

    Returns:
        tuple[datetime, datetime]: The [start, end) window of the seeded month.
    """
    moderators = [
        User(username=f"mod_{i}", email=f"mod_{i}@example.com", staff=i % 5 != 0)
        for i in range(10)
    ]
    session.add_all(moderators)
    session.flush()

    start = datetime(2026, 4, 1)
    for i in range(2000):
        moderator = moderators[i % len(moderators)]
        session.add(
            ModerationLog(
                moderator_id=moderator.id_user,  # type: ignore
                moderator_username=moderator.username,
                action_type=ACTIONS[i % len(ACTIONS)],
                created_at=start + timedelta(minutes=21 * i),
            )
        )
    for i in range(500):
        created_at = start + timedelta(minutes=85 * i)
        handled = i % 4 != 0
        session.add(
            Report(
                reason=f"Bench report {i}",
                id_user_reporter=moderators[0].id_user,  # type: ignore
                id_user_reported=moderators[1].id_user,  # type: ignore
                status=ReportStatus.RESOLVED if handled else ReportStatus.PENDING,
                created_at=created_at,
                reviewed_at=created_at + timedelta(hours=3) if handled else None,
            )
        )
    session.commit()
    return start, datetime(2026, 5, 1)
