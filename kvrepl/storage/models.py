"""
SQLAlchemy Models.

A store is one table of byte-string keys and values. SQLite compares
BLOB primary keys with memcmp, so ordering by key is bytewise.
"""

from sqlalchemy import LargeBinary
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class Record(Base):
    __tablename__ = "records"

    key: Mapped[bytes] = mapped_column(LargeBinary, primary_key=True)
    value: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)

    def __repr__(self) -> str:
        return f"Record(key={self.key!r}, value={self.value!r})"
