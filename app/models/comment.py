from datetime import datetime, UTC
from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.db.database import Base


def utcnow() -> datetime:
    """Naive UTC now; SQLite hands back naive datetimes"""
    return datetime.now(UTC).replace(tzinfo=None)


class Comment(Base):
    """Comment model, lives only inside its post"""
    __tablename__ = "comments"

    # autoincrement id doubles as insertion order
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    username: Mapped[str] = mapped_column(String, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    commented_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
