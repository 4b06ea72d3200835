"""
Todo model: a single item on a user's list.

Ownership (``user_id``) is fixed at creation; every read and write goes
through a lookup filtered on both the todo id and the owner id.
"""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Text, false
from sqlalchemy.orm import relationship

from todo_api.models.base import Base, IntegerIDMixin, TimestampMixin


class Todo(Base, IntegerIDMixin, TimestampMixin):
    __tablename__ = "todos"

    description = Column(Text, nullable=False, comment="What needs to be done")

    due_date = Column(
        DateTime(timezone=True),
        nullable=True,
        comment="Optional due date (not settable through the API yet)",
    )

    completed = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
        comment="Whether the todo has been completed",
    )

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owning user",
    )

    owner = relationship("User", back_populates="todos")

    def __repr__(self):
        return (
            f"<Todo(id={self.id}, user_id={self.user_id}, completed={self.completed})>"
        )
