from unittest.mock import Mock, patch

import pytest
from sqlmodel import Session, func, select

from modactivity.database.init_sample_data import SAMPLE_MODERATORS, init_sample_data
from modactivity.models.moderation_log import ModerationLog
from modactivity.models.report import Report
from modactivity.models.user import User


def _count(session: Session, model) -> int:
    return session.exec(select(func.count()).select_from(model)).one()


class TestInitSampleData:
    def test_seeds_moderators_actions_and_reports(self, session: Session):
        init_sample_data(session)

        assert _count(session, ModerationLog) == 120
        assert _count(session, Report) == 60
        staff = session.exec(select(User).where(User.staff == True)).all()  # noqa: E712
        assert {u.username for u in staff} == {n for n, s in SAMPLE_MODERATORS if s}
        assert all(u.secret for u in staff)

    def test_reviews_follow_creation(self, session: Session):
        init_sample_data(session)

        for report in session.exec(select(Report)).all():
            if report.reviewed_at is None:
                continue
            assert report.reviewed_at >= report.created_at

    def test_is_idempotent(self, session: Session):
        init_sample_data(session)
        init_sample_data(session)

        assert _count(session, ModerationLog) == 120

    def test_refuses_production(self, session: Session):
        with patch(
            "modactivity.database.init_sample_data.get_settings",
            return_value=Mock(ENVIRONMENT="Production"),
        ):
            with pytest.raises(RuntimeError):
                init_sample_data(session)

        assert _count(session, ModerationLog) == 0

    def test_secrets_are_not_logged(self, session: Session):
        with patch("modactivity.database.init_sample_data.logger") as mock_logger:
            init_sample_data(session)

        secrets = [
            u.secret for u in session.exec(select(User)).all() if u.secret is not None
        ]
        logged = " ".join(str(c) for c in mock_logger.info.call_args_list)
        assert secrets
        assert "mira" in logged
        assert not any(secret in logged for secret in secrets)
