from fastapi import APIRouter
from app.api.endpoints import (
    posts,
    comments,
    likes
)

api_router = APIRouter()

api_router.include_router(posts.router, prefix="/posts", tags=["posts"])
api_router.include_router(comments.router, prefix="/posts/{post_id}/comments", tags=["comments"])
api_router.include_router(likes.router, prefix="/posts/{post_id}", tags=["likes"])
