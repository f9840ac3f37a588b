"""SQLAlchemy ORM model definitions."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, LargeBinary, String

from dtrack.repositories.sqlalchemy.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PartitionEntryORM(Base):
    """One owner's serialized aggregate within one partition."""

    __tablename__ = "partition_entries"

    partition_id = Column(Integer, primary_key=True)
    owner_key = Column(String(255), primary_key=True)
    payload = Column(LargeBinary, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)
