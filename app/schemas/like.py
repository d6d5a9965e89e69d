from pydantic import BaseModel, Field


class LikeRequest(BaseModel):
    """Like / unlike request model"""
    username: str = Field(..., description="User toggling the like")
