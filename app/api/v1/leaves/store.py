"""
Leave applications live as one JSON document under a fixed key of the local
key-value store. Unreadable documents are logged and treated as empty.
"""

import asyncio
from datetime import datetime, timezone
from typing import List

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging_config import get_logger
from app.core.models import KeyValueEntry
from app.core.state import StateRegistry

from .schemas import LeaveApplication

logger = get_logger(__name__)

LEAVE_APPLICATIONS_KEY = "leave_applications"

_adapter = TypeAdapter(List[LeaveApplication])

# One writer per document key
_locks: StateRegistry[asyncio.Lock] = StateRegistry(lambda _key: asyncio.Lock())


def encode_applications(applications: List[LeaveApplication]) -> str:
    return _adapter.dump_json(applications).decode("utf-8")


def decode_applications(raw: str) -> List[LeaveApplication]:
    return _adapter.validate_json(raw)


class LeaveStore:
    def __init__(self, db: AsyncSession, key: str = LEAVE_APPLICATIONS_KEY) -> None:
        self.db = db
        self.key = key

    @property
    def lock(self) -> asyncio.Lock:
        """Hold while loading, modifying and saving the document."""
        return _locks.get(self.key)

    async def load(self) -> List[LeaveApplication]:
        entry = await self.db.get(KeyValueEntry, self.key, populate_existing=True)
        if entry is None or not entry.value:
            return []
        try:
            return decode_applications(entry.value)
        except (ValidationError, ValueError) as e:
            logger.error("Failed to decode leave applications under %r: %s", self.key, e)
            return []

    async def save(self, applications: List[LeaveApplication]) -> bool:
        try:
            payload = encode_applications(applications)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            logger.error("Failed to encode leave applications: %s", e)
            return False

        entry = await self.db.get(KeyValueEntry, self.key)
        if entry is None:
            self.db.add(KeyValueEntry(key=self.key, value=payload))
        else:
            entry.value = payload
            entry.updated_at = datetime.now(timezone.utc)
        await self.db.commit()
        return True
