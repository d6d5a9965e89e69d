from fastapi import APIRouter, Depends, status
from app.schemas.comment import CommentCreate
from app.schemas.post import PostMessage
from app.services.post_store import PostStore, get_post_store

router = APIRouter()


@router.post("", response_model=PostMessage, status_code=status.HTTP_201_CREATED, summary="Add a comment to a post")
def create_comment(
    post_id: str,
    comment: CommentCreate,
    store: PostStore = Depends(get_post_store)
):
    """Append a comment to a post and return the post"""
    post = store.add_comment(post_id, username=comment.username, message=comment.message)
    return {"message": "Comment added", "post": post}
