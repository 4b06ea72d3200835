"""
User model for authentication and todo ownership.

Users are created on registration and never deleted by the service. The
``hashed_password`` attribute holds the bcrypt secret (stored in the
``password`` column); the plaintext is never persisted.
"""

from sqlalchemy import Column, Index, String
from sqlalchemy.orm import relationship

from todo_api.models.base import Base, IntegerIDMixin, TimestampMixin


class User(Base, IntegerIDMixin, TimestampMixin):
    """Registered account that owns todos."""

    __tablename__ = "users"
    __table_args__ = (Index("ix_users_username", "username", unique=True),)

    username = Column(
        String(50),
        nullable=False,
        comment="Unique username for user identification and login",
    )

    hashed_password = Column(
        "password",
        String(255),
        nullable=False,
        comment="bcrypt hash of the peppered password",
    )

    todos = relationship(
        "Todo",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
        doc="Todos owned by this user",
    )

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
