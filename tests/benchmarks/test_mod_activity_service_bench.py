"""Benchmark tests for moderation activity aggregation."""

from pytest_codspeed import BenchmarkFixture
from sqlmodel import Session

from modactivity.services import mod_activity as mod_activity_service


class TestModActivityServiceBenchmarks:
    """Benchmark the aggregation queries and reshaping over a busy month."""

    def test_moderator_action_counts_benchmark(
        self, benchmark: BenchmarkFixture, session: Session, busy_month
    ):
        start, end = busy_month

        @benchmark
        def count_actions():
            return mod_activity_service.get_moderator_action_counts(session, start, end)

    def test_daily_actions_by_moderator_benchmark(
        self, benchmark: BenchmarkFixture, session: Session, busy_month
    ):
        start, end = busy_month

        @benchmark
        def daily_actions():
            return mod_activity_service.get_daily_actions_by_moderator(
                session, start, end
            )

    def test_daily_report_flow_benchmark(
        self, benchmark: BenchmarkFixture, session: Session, busy_month
    ):
        start, end = busy_month

        @benchmark
        def report_flow():
            incoming = mod_activity_service.get_daily_incoming_reports(
                session, start, end
            )
            handled = mod_activity_service.get_daily_handled_reports(
                session, start, end
            )
            return mod_activity_service.build_daily_reports(incoming, handled, 30)

    def test_summarize_moderators_benchmark(
        self, benchmark: BenchmarkFixture, session: Session, busy_month
    ):
        start, end = busy_month
        rows = mod_activity_service.get_moderator_action_counts(session, start, end)

        @benchmark
        def summarize():
            summaries = mod_activity_service.summarize_moderators(rows)
            return mod_activity_service.sum_action_totals(summaries)
