"""Local key-value store. One row per key, value is a serialized document."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Text

from app.db.session import Base


class KeyValueEntry(Base):
    __tablename__ = "key_value_store"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc), nullable=False)
