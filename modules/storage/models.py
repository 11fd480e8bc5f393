"""
Storage Module - Models
========================
StorageEntry: one key/value pair of device-local storage (JSON text values).
"""

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func
from config.database import Base


class StorageEntry(Base):
    __tablename__ = "storage_entries"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<StorageEntry {self.key}>"
