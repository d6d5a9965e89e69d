from datetime import datetime
from typing import List
from sqlalchemy import String, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.db.database import Base
from app.models.comment import Comment, utcnow
import uuid

DEFAULT_CATEGORY = "General"


class Post(Base):
    """Blog post document, owns its comments"""
    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(String, nullable=False)
    tags: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    category: Mapped[str] = mapped_column(String, nullable=False, default=DEFAULT_CATEGORY)
    # usernames, kept duplicate-free by the store
    likes: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)

    comments: Mapped[List[Comment]] = relationship(
        Comment,
        order_by=Comment.id,
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )
