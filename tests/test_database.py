from unittest.mock import patch

from sqlalchemy import inspect
from sqlmodel import Session

from modactivity.database import database
from modactivity.database.database import create_db_and_tables, get_engine, get_session


class TestDatabase:
    """Test engine and session helpers."""

    def test_get_engine_returns_module_engine(self):
        assert get_engine() is database.engine

    def test_get_session_yields_session(self):
        generator = get_session()
        session = next(generator)

        assert isinstance(session, Session)
        assert session.get_bind() is database.engine
        generator.close()

    def test_create_db_and_tables(self, engine):
        with patch.object(database, "engine", engine):
            create_db_and_tables()

        tables = set(inspect(engine).get_table_names())
        assert {"user", "moderation_log", "report"} <= tables
