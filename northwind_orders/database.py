"""
Database engine, session factory and declarative base
"""
from typing import Generator

import structlog
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool
from tenacity import retry, stop_after_attempt, wait_exponential

from northwind_orders.config import settings

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models"""


def create_db_engine(database_url: str) -> Engine:
    """
    Create SQLAlchemy engine for the given URL

    SQLite gets a single shared connection with foreign keys switched on,
    everything else a pre-pinged connection pool.
    """
    if database_url.startswith("sqlite"):
        db_engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

        @event.listens_for(db_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return db_engine

    return create_engine(
        database_url,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


engine = create_db_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@retry(
    stop=stop_after_attempt(settings.MAX_RETRIES),
    wait=wait_exponential(multiplier=settings.RETRY_DELAY, min=1, max=10),
    reraise=True
)
def init_db(db_engine: Engine = None) -> None:
    """Create all tables, retrying while the database is still coming up"""
    # Import models so they register on Base.metadata
    from northwind_orders.models import order, reference  # noqa: F401

    db_engine = db_engine or engine
    with db_engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    Base.metadata.create_all(bind=db_engine)
    logger.info("database_initialized", url=db_engine.url.render_as_string(hide_password=True))


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding one session per request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
