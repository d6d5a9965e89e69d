from fastapi import APIRouter, Depends, status
from typing import List
from app.schemas.post import PostCreate, PostUpdate, PostResponse, PostMessage, Message
from app.services.post_store import PostStore, get_post_store

router = APIRouter()


@router.post("", response_model=PostMessage, status_code=status.HTTP_201_CREATED, summary="Create a new blog post")
def create_post(
    post: PostCreate,
    store: PostStore = Depends(get_post_store)
):
    """Create a new blog post"""
    new_post = store.create(
        title=post.title,
        content=post.content,
        author=post.author,
        tags=post.tags,
        category=post.category
    )
    return {"message": "Blog post created", "post": new_post}


@router.get("", response_model=List[PostResponse], summary="List all blog posts")
def list_posts(store: PostStore = Depends(get_post_store)):
    """List all blog posts"""
    return store.list()


@router.get("/{post_id}", response_model=PostResponse, summary="Get a blog post by ID")
def get_post(
    post_id: str,
    store: PostStore = Depends(get_post_store)
):
    """Get a blog post by ID"""
    return store.get(post_id)


@router.put("/{post_id}", response_model=PostMessage, summary="Update title, content, author, tags or category of a post")
def update_post(
    post_id: str,
    post_update: PostUpdate,
    store: PostStore = Depends(get_post_store)
):
    """Update a blog post, only the fields present in the body are changed"""
    updated_post = store.update(post_id, post_update.model_dump(exclude_unset=True))
    return {"message": "Post updated", "post": updated_post}


@router.delete("/{post_id}", response_model=Message, summary="Delete a post and all its comments")
def delete_post(
    post_id: str,
    store: PostStore = Depends(get_post_store)
):
    """Delete a post and all its comments"""
    store.delete(post_id)
    return {"message": "Post deleted"}
