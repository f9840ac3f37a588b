"""Application context: the stores and services constructed once at startup.

The context owns the database engine and session factory. Everything that
touches persistent state receives it (or a session it created) explicitly;
there is no module-level store.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from dtrack.config.settings import Settings, get_settings
from dtrack.core.clock import Clock, now_ns
from dtrack.repositories import OwnerRepository
from dtrack.repositories.sqlalchemy import (
    create_db_engine,
    create_session_factory,
    init_db,
)
from dtrack.services import TrackingService

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context providing access to the repository and services.

    ``initialize`` opens (or reopens) the database named by the settings.
    Reopening an existing database reattaches all stored partitions.
    """

    def __init__(self, settings: Optional[Settings] = None, clock: Clock = now_ns):
        """
        Initialize application context.

        Args:
            settings: Configuration to use. Falls back to get_settings().
            clock: Epoch-nanosecond clock used for derived transaction ids.
        """
        self._settings = settings
        self.clock = clock
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @property
    def is_initialized(self) -> bool:
        """Check if context is initialized."""
        return self._session_factory is not None

    def initialize(self) -> None:
        """Create the engine and make sure the schema exists."""
        self.close()
        database_url = self.settings.get_database_url()
        self._engine = create_db_engine(database_url)
        init_db(self._engine)
        self._session_factory = create_session_factory(self._engine)

    def session(self) -> Session:
        """Open a new database session."""
        if self._session_factory is None:
            raise RuntimeError("AppContext is not initialized")
        return self._session_factory()

    @contextmanager
    def tracking(self) -> Iterator[TrackingService]:
        """Provide a TrackingService bound to a fresh session."""
        session = self.session()
        try:
            yield TrackingService(OwnerRepository(session, clock=self.clock))
        finally:
            session.close()

    def close(self) -> None:
        """Release the engine; a later initialize() reattaches the same data."""
        if self._engine is not None:
            self._engine.dispose()
            logger.debug("Disposed database engine")
        self._engine = None
        self._session_factory = None
