import os

# Settings are read when modactivity.database.database is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from datetime import datetime  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from modactivity import models  # noqa: E402, F401
from modactivity.core.config import Settings  # noqa: E402
from modactivity.database.database import get_engine, get_session  # noqa: E402
from modactivity.main import app  # noqa: E402
from modactivity.models.enums import ReportStatus  # noqa: E402
from modactivity.models.moderation_log import ModerationLog  # noqa: E402
from modactivity.models.report import Report  # noqa: E402
from modactivity.models.user import User  # noqa: E402


@pytest.fixture(scope="function")
def test_settings():
    """Provide test settings with mock values."""
    return Settings(
        DATABASE_URL="sqlite:///:memory:",
        ENVIRONMENT="test",
        BACKEND_CORS_ORIGINS="",
    )


@pytest.fixture(name="engine")
def engine_fixture(tmp_path):
    """
    File-backed SQLite engine.

    The report builder opens one session per aggregation on worker threads, so
    each needs its own connection to the same database; an in-memory database
    would give each connection an empty schema.
    """
    engine = create_engine(
        f"sqlite:///{tmp_path / 'mod_activity.db'}",
        connect_args={"check_same_thread": False},
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(engine):
    """Test client whose session and engine dependencies point at the test database."""

    def _get_test_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_test_session
    app.dependency_overrides[get_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(name="make_user")
def make_user_fixture(session: Session):
    """Factory creating a persisted user; staff by default."""

    def _make(username: str, staff: bool = True, secret: str | None = None) -> User:
        user = User(
            username=username,
            email=f"{username}@example.com",
            staff=staff,
            secret=secret,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make


@pytest.fixture(name="log_action")
def log_action_fixture(session: Session):
    """Factory logging `count` identical moderation actions."""

    def _log(
        moderator: User,
        action_type: str,
        created_at: datetime,
        count: int = 1,
        username: str | None = None,
    ) -> None:
        for _ in range(count):
            session.add(
                ModerationLog(
                    moderator_id=moderator.id_user,
                    moderator_username=username or moderator.username,
                    action_type=action_type,
                    created_at=created_at,
                )
            )
        session.commit()

    return _log


@pytest.fixture(name="member")
def member_fixture(make_user) -> User:
    return make_user("member", staff=False)


@pytest.fixture(name="make_report")
def make_report_fixture(session: Session, member: User):
    """Factory creating a report filed by and against `member`."""

    def _make(
        created_at: datetime,
        status: ReportStatus = ReportStatus.PENDING,
        reviewed_at: datetime | None = None,
    ) -> Report:
        report = Report(
            reason="Repeated spam in the general channel",
            id_user_reporter=member.id_user,
            id_user_reported=member.id_user,
            status=status,
            created_at=created_at,
            reviewed_at=reviewed_at,
        )
        session.add(report)
        session.commit()
        session.refresh(report)
        return report

    return _make
