from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def new_object_id() -> str:
    """Return a fresh store-assigned document identifier."""
    return uuid.uuid4().hex


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------
class User(Base):
    __tablename__ = "users"

    id: Mapped[Optional[str]] = mapped_column(String(32), primary_key=True, default=new_object_id)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    # No relationship to Post: a user's posts are fetched explicitly through
    # repository.find_posts_by_author.

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r})"


# ---------------------------------------------------------------------------
# Post
# ---------------------------------------------------------------------------
class Post(Base):
    __tablename__ = "posts"

    id: Mapped[Optional[str]] = mapped_column(String(32), primary_key=True, default=new_object_id)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False, index=True)
    body: Mapped[str] = mapped_column(Text, nullable=False)

    # Embedded documents. The author is a {id, name} snapshot taken when the
    # post is written; comments are an ordered list of
    # {text, date, author: {id, name}}. Both are reassigned, never mutated
    # in place, so the session notices the change.
    author: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    comments: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"Post(id={self.id!r}, title={self.title!r})"
