from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional, List
from app.schemas.comment import CommentResponse, as_utc


class PostCreate(BaseModel):
    """Create post request model"""
    title: str
    content: str
    author: str
    tags: Optional[List[str]] = Field(default=None, description="Ordered tag list")
    category: Optional[str] = Field(default=None, description="Defaults to General")


class PostUpdate(BaseModel):
    """Update post request model, only the fields sent are applied"""
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    tags: Optional[List[str]] = None
    category: Optional[str] = None


class PostResponse(BaseModel):
    """Post response model"""
    id: str
    title: str
    content: str
    author: str
    tags: List[str]
    category: str
    likes: List[str]
    comments: List[CommentResponse]
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def timestamps_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    class Config:
        from_attributes = True


class PostMessage(BaseModel):
    """Outcome message plus the affected post"""
    message: str
    post: PostResponse


class Message(BaseModel):
    message: str
