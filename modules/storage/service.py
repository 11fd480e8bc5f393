"""
Storage Module - Service Layer
================================
Device-local key/value storage with JSON values.
Reads go through a typed decode step: absent or malformed values come back
as the caller's default instead of raising.
"""

import json
import logging
from typing import Any, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from config.settings import STORAGE_PREFIX
from modules.storage.models import StorageEntry

logger = logging.getLogger("seedhaven.storage")

T = TypeVar("T")


# ==========================================
# Keys
# ==========================================

def users_key() -> str:
    return f"{STORAGE_PREFIX}_users"


def active_user_key() -> str:
    return f"{STORAGE_PREFIX}_active_user"


def cart_key(user_id: str) -> str:
    return f"{STORAGE_PREFIX}_cart_{user_id}"


class LocalStorage:
    """Key/value store. Every write is a single whole-value overwrite, committed immediately."""

    def __init__(self, db: Session):
        self.db = db

    def get_item(self, key: str) -> Optional[str]:
        entry = self.db.get(StorageEntry, key)
        return entry.value if entry else None

    def set_item(self, key: str, value: str):
        entry = self.db.get(StorageEntry, key)
        if entry:
            entry.value = value
        else:
            self.db.add(StorageEntry(key=key, value=value))
        self.db.commit()

    def remove_item(self, key: str):
        entry = self.db.get(StorageEntry, key)
        if entry:
            self.db.delete(entry)
            self.db.commit()

    # ==========================================
    # JSON helpers
    # ==========================================

    def read_json(self, key: str, default: Any = None) -> Any:
        raw = self.get_item(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"Unreadable value under '{key}', treating as empty")
            return default

    def read_typed(self, key: str, adapter: TypeAdapter, default: T) -> T:
        """Decode a stored value into typed records; malformed data yields `default`."""
        raw = self.get_item(key)
        if raw is None:
            return default
        try:
            return adapter.validate_json(raw)
        except PydanticValidationError as e:
            logger.warning(f"Malformed value under '{key}' ({e.error_count()} errors), treating as empty")
            return default

    def write_json(self, key: str, value: Any):
        self.set_item(key, json.dumps(value))

    def write_typed(self, key: str, adapter: TypeAdapter, value: Any):
        self.set_item(key, adapter.dump_json(value).decode("utf-8"))
