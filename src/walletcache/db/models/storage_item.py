"""Persistent key-value item (the server-side stand-in for browser localStorage)."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from walletcache.db.session import Base, TimestampMixin


class StorageItem(TimestampMixin, Base):
    """One stored string value. No TTL: readers judge staleness from the payload."""

    __tablename__ = "local_storage"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text)
