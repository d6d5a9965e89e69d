from datetime import datetime, UTC
from pydantic import BaseModel, Field, field_validator


def as_utc(value: datetime) -> datetime:
    """Stored timestamps are naive UTC, mark them as such"""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class CommentCreate(BaseModel):
    """Add comment request model"""
    username: str = Field(..., description="Commenter username")
    message: str = Field(..., description="Comment text")


class CommentResponse(BaseModel):
    """Comment response model"""
    id: int = Field(..., description="Comment ID")
    username: str
    message: str
    commented_at: datetime = Field(..., description="Time the comment was added")

    @field_validator("commented_at")
    @classmethod
    def commented_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    class Config:
        from_attributes = True
