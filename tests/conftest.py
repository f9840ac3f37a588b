"""
Pytest configuration and fixtures for dtrack tests.

This module provides:
- In-memory SQLite database fixtures
- A fixed, manually advanced clock
- Repository and service fixtures
- Account helpers
- A FastAPI test client backed by a temporary database file
"""

from typing import Callable

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session

from dtrack.api.deps import get_clock
from dtrack.config.settings import Settings, reset_settings
from dtrack.core.clock import NANOS_PER_SECOND
from dtrack.domain.models import IdentityKey, LabeledAccount, OffChainAccount, OnChainAccount
from dtrack.main import create_app
from dtrack.repositories import OwnerRepository
from dtrack.repositories.sqlalchemy import Base
# Import ORM models to register them with Base before creating tables
from dtrack.repositories.sqlalchemy import orm_models  # noqa: F401
from dtrack.services import TrackingService


OWNER = IdentityKey("rrkah-fqaaa-aaaaa-aaaaq-cai")
OTHER_OWNER = IdentityKey("ryjl3-tyaaa-aaaaa-aaaba-cai")

# 2023-11-14T22:13:20Z
FIXED_EPOCH_SECONDS = 1_700_000_000


# =============================================================================
# CLOCK
# =============================================================================


class FixedClock:
    """Epoch-nanosecond clock that only moves when told to."""

    def __init__(self, seconds: int = FIXED_EPOCH_SECONDS):
        self.nanos = seconds * NANOS_PER_SECOND

    def __call__(self) -> int:
        return self.nanos

    def advance(self, seconds: float = 1.0) -> None:
        self.nanos += int(seconds * NANOS_PER_SECOND)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned at FIXED_EPOCH_SECONDS."""
    return FixedClock()


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY AND SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def owner_repo(test_session, fixed_clock) -> OwnerRepository:
    """Provide test OwnerRepository."""
    return OwnerRepository(test_session, clock=fixed_clock)


@pytest.fixture
def tracking_service(owner_repo) -> TrackingService:
    """Provide test TrackingService."""
    return TrackingService(owner_repo)


# =============================================================================
# ACCOUNT HELPERS
# =============================================================================


def offchain(n: int) -> OffChainAccount:
    """Distinct off-chain account number n."""
    return OffChainAccount(address=f"bank-account-{n:03d}")


def onchain(n: int = 0) -> OnChainAccount:
    """Ledger account of OWNER; n > 0 selects a subaccount."""
    subaccount = bytes([0] * 31 + [n]) if n else None
    return OnChainAccount(owner=OWNER, subaccount=subaccount)


@pytest.fixture
def account_factory(owner_repo) -> Callable[..., list[LabeledAccount]]:
    """Factory that stores n distinct off-chain accounts for an owner."""

    def _create(n: int, owner: IdentityKey = OWNER) -> list[LabeledAccount]:
        created = []
        for i in range(n):
            labeled = LabeledAccount(account=offchain(i), label=f"Account {i}")
            created.append(owner_repo.add_account(owner, labeled))
        return created

    return _create


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Settings pointing at a temporary data directory."""
    reset_settings()
    return Settings(data_dir=tmp_path / "data", log_level="WARNING")


@pytest.fixture
def client(api_settings, fixed_clock) -> TestClient:
    """Provide FastAPI test client acting as OWNER."""
    app = create_app(api_settings)
    app.dependency_overrides[get_clock] = lambda: fixed_clock
    with TestClient(app) as c:
        c.headers["X-Identity"] = OWNER
        yield c
    app.dependency_overrides.clear()
