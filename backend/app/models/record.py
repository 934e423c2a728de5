"""
Records API - Record SQLAlchemy Model
=======================================

What:  ORM model representing the `data` table.
How:   Inherits from SQLAlchemy's DeclarativeBase; `init_models()` in
       database.py creates the table from this definition when missing.
Who:   Used by RecordService for the insert and list statements.

Table layout:
    - id:          Auto-incrementing integer primary key, assigned by the store
    - name:        Caller-supplied string, NULL when omitted from the request
    - description: Caller-supplied string, NULL when omitted from the request

Rows are never updated or deleted by this service.
"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Record(Base):
    """A single row of the `data` table."""

    __tablename__ = "data"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Record(id={self.id}, name={self.name!r})>"
