from fastapi import APIRouter, Depends, status
from app.schemas.like import LikeRequest
from app.schemas.post import PostMessage
from app.services.post_store import PostStore, get_post_store

router = APIRouter()


@router.post("/like", response_model=PostMessage, status_code=status.HTTP_200_OK, summary="Like a post")
def like_post(
    post_id: str,
    like_in: LikeRequest,
    store: PostStore = Depends(get_post_store)
):
    """Like a post; liking it again is a no-op"""
    post = store.like(post_id, like_in.username)
    return {"message": "Post liked", "post": post}


@router.post("/unlike", response_model=PostMessage, status_code=status.HTTP_200_OK, summary="Remove a like from a post")
def unlike_post(
    post_id: str,
    like_in: LikeRequest,
    store: PostStore = Depends(get_post_store)
):
    """Unlike a post; unliking without a like is a no-op"""
    post = store.unlike(post_id, like_in.username)
    return {"message": "Post unliked", "post": post}
