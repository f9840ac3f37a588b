"""SQLAlchemy repository implementations."""

from dtrack.repositories.sqlalchemy.database import (
    Base,
    create_db_engine,
    create_session_factory,
    init_db,
)
from dtrack.repositories.sqlalchemy.partition_store import SqlAlchemyPartitionStore

__all__ = [
    "Base",
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "SqlAlchemyPartitionStore",
]
