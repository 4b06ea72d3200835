"""
Base configurations and mixins for database models.

Provides the declarative base shared by every model and mixins for
integer primary keys and automatic timestamps.
"""

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql.functions import now as db_now

# Create the base class for all models
Base = declarative_base()


class TimestampMixin:
    """
    Adds database-managed ``created_at`` / ``updated_at`` columns.

    ``updated_at`` is refreshed by the database whenever the row is updated
    through the ORM.
    """

    created_at = Column(
        DateTime(timezone=True),
        server_default=db_now(),
        nullable=False,
        comment="Timestamp when the record was created",
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=db_now(),
        onupdate=db_now(),
        nullable=False,
        comment="Timestamp when the record was last updated",
    )


class IntegerIDMixin:
    """Store-assigned autoincrementing integer primary key."""

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        index=True,
        comment="Store-assigned primary key",
    )


__all__ = ["Base", "TimestampMixin", "IntegerIDMixin"]
