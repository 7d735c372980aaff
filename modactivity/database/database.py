from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine

from modactivity.core.config import get_settings

engine = create_engine(
    get_settings().DATABASE_URL,
    echo=get_settings().SQL_ECHO,
    pool_pre_ping=True,
)


def create_db_and_tables():
    """
    Create database tables defined in SQLModel metadata.

    Creates the user, moderation_log and report tables in the configured database using the module-level engine.
    """
    # Table models must be imported so they register on SQLModel.metadata
    from modactivity import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session():
    """
    Provide a context-managed SQLModel session.

    Returns:
        session (Session): A SQLModel Session bound to the module-level engine. The session is yielded for use and is closed when the generator exits.
    """
    with Session(engine) as session:
        yield session


def get_engine() -> Engine:
    """
    Provide the module-level engine.

    The report builder opens one session per aggregation so that independent
    queries can run on separate worker threads; it needs the engine rather than
    a single request-scoped session.
    """
    return engine
