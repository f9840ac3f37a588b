"""Dependency injection for FastAPI."""

from typing import Generator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from dtrack.app_context import AppContext
from dtrack.core.clock import Clock
from dtrack.domain.models import IdentityKey
from dtrack.repositories import OwnerRepository
from dtrack.services import TrackingService
from dtrack.services.validation import validate_identity


def get_app_context(request: Request) -> AppContext:
    """Provide the AppContext created at startup."""
    return request.app.state.context


def get_db(context: AppContext = Depends(get_app_context)) -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = context.session()
    try:
        yield db
    finally:
        db.close()


def get_clock(context: AppContext = Depends(get_app_context)) -> Clock:
    """Provide the clock used for derived transaction ids."""
    return context.clock


def get_identity(x_identity: Optional[str] = Header(default=None)) -> IdentityKey:
    """Resolve the caller's identity from the X-Identity header."""
    return validate_identity(x_identity)


def get_owner_repository(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> OwnerRepository:
    """Provide OwnerRepository instance."""
    return OwnerRepository(db, clock=clock)


def get_tracking_service(
    repository: OwnerRepository = Depends(get_owner_repository),
) -> TrackingService:
    """Provide TrackingService instance."""
    return TrackingService(repository)
