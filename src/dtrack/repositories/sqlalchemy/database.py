"""Database engine and session construction."""

import logging

from sqlalchemy import create_engine, event, Engine
from sqlalchemy.orm import sessionmaker, declarative_base

logger = logging.getLogger(__name__)

Base = declarative_base()

# Seconds a connection waits for another writer before "database is locked".
SQLITE_BUSY_TIMEOUT = 30


def create_db_engine(database_url: str) -> Engine:
    """
    Create an engine for the given database URL.

    SQLite transactions start with BEGIN IMMEDIATE, so a repository
    operation holds the write lock from its first read to its commit and
    concurrent operations run one after another instead of overwriting each
    other's read-modify-write.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=False)

    engine = create_engine(
        database_url,
        connect_args={"check_same_thread": False, "timeout": SQLITE_BUSY_TIMEOUT},
        echo=False,
    )
    _use_immediate_transactions(engine)
    return engine


def _use_immediate_transactions(engine: Engine) -> None:
    # pysqlite's own implicit BEGIN is deferred; take over transaction start.
    @event.listens_for(engine, "connect")
    def _disable_implicit_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """
    Create missing tables.

    Existing tables and rows are left untouched, so calling this on an
    existing database reattaches every partition as it was.
    """
    from dtrack.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
