from loguru import logger
from sqlmodel import Session

from modactivity.core.config import get_settings
from modactivity.database.database import engine, create_db_and_tables
from modactivity.database.init_sample_data import init_sample_data
from modactivity.utils.logger import setup_logging


def init() -> None:
    """
    Create the database schema and, outside production, seed sample moderation data.
    """
    create_db_and_tables()
    if get_settings().ENVIRONMENT.lower() == "production":
        logger.info("Production environment: schema only, no sample data")
        return
    with Session(engine) as session:
        init_sample_data(session)


def main() -> None:
    setup_logging()
    logger.info("Creating initial data")
    init()
    logger.info("Initial data created")


if __name__ == "__main__":
    main()
