import logging
from datetime import timedelta
from typing import Any, Dict, List, Mapping, Optional

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFound, ValidationError
from app.db.database import get_session
from app.models.comment import Comment, utcnow
from app.models.post import DEFAULT_CATEGORY, Post

logger = logging.getLogger(__name__)

TITLE_MIN_LENGTH = 5
CONTENT_MIN_LENGTH = 50

UPDATABLE_FIELDS = ("title", "content", "author", "tags", "category")


def touch(post: Post) -> None:
    """Refresh updated_at on a post about to be mutated.

    The new stamp is never earlier than created_at, and for a post that
    already exists it is strictly later.
    """
    now = utcnow()
    if post.created_at is not None and now <= post.created_at:
        now = post.created_at + timedelta(microseconds=1)
    post.updated_at = now


def validate_post_fields(fields: Mapping[str, Any]) -> None:
    """Check title/content/author/tags/category constraints"""
    for name in UPDATABLE_FIELDS:
        if name in fields and fields[name] is None:
            raise ValidationError(f"Path `{name}` is required.")

    title = fields.get("title")
    if title is not None and len(title) < TITLE_MIN_LENGTH:
        raise ValidationError(
            f"Path `title` is shorter than the minimum allowed length ({TITLE_MIN_LENGTH})."
        )

    content = fields.get("content")
    if content is not None and len(content) < CONTENT_MIN_LENGTH:
        raise ValidationError(
            f"Path `content` is shorter than the minimum allowed length ({CONTENT_MIN_LENGTH})."
        )

    if "author" in fields and not fields["author"]:
        raise ValidationError("Path `author` is required.")

    tags = fields.get("tags")
    if tags is not None and (
        not isinstance(tags, (list, tuple)) or not all(isinstance(tag, str) for tag in tags)
    ):
        raise ValidationError("Path `tags` must be a list of strings.")


def _require_username(username: str) -> None:
    if not username:
        raise ValidationError("Path `username` is required.")


class PostStore:
    """Post persistence bound to one database session.

    Every method is a single read or a single committed write.
    """

    def __init__(self, session: Session):
        self.session = session

    def _find(self, post_id: str) -> Optional[Post]:
        return self.session.get(Post, post_id)

    def _title_taken(self, title: str, exclude_id: Optional[str] = None) -> bool:
        query = self.session.query(Post.id).filter(Post.title == title)
        if exclude_id is not None:
            query = query.filter(Post.id != exclude_id)
        return query.first() is not None

    def _commit(self, post: Post) -> Post:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            # unique index on title lost a race with another writer
            raise ValidationError(f"Duplicate key: {e.orig}") from e
        self.session.refresh(post)
        return post

    def create(
        self,
        title: str,
        content: str,
        author: str,
        tags: Optional[List[str]] = None,
        category: Optional[str] = None,
    ) -> Post:
        """Create a post; tags default to [] and category to General"""
        validate_post_fields({"title": title, "content": content, "author": author, "tags": tags})
        if self._title_taken(title):
            raise ValidationError(f"A post titled '{title}' already exists")

        now = utcnow()
        post = Post(
            title=title,
            content=content,
            author=author,
            tags=list(tags) if tags is not None else [],
            category=category if category is not None else DEFAULT_CATEGORY,
            likes=[],
            created_at=now,
            updated_at=now,
        )
        self.session.add(post)
        self._commit(post)
        logger.info("Created post %s", post.id)
        return post

    def list(self) -> List[Post]:
        """All posts in insertion order"""
        return self.session.query(Post).all()

    def get(self, post_id: str) -> Post:
        post = self._find(post_id)
        if post is None:
            raise NotFound()
        return post

    def update(self, post_id: str, fields: Mapping[str, Any]) -> Post:
        """Apply the given fields to a post and re-validate it"""
        post = self.get(post_id)
        changes: Dict[str, Any] = {
            name: value for name, value in fields.items() if name in UPDATABLE_FIELDS
        }
        validate_post_fields(changes)
        if "title" in changes and self._title_taken(changes["title"], exclude_id=post.id):
            raise ValidationError(f"A post titled '{changes['title']}' already exists")

        touch(post)
        for name, value in changes.items():
            setattr(post, name, list(value) if name == "tags" else value)
        self._commit(post)
        logger.info("Updated post %s (%s)", post.id, ", ".join(changes) or "no fields")
        return post

    def delete(self, post_id: str) -> None:
        """Delete a post together with its comments"""
        post = self.get(post_id)
        self.session.delete(post)
        self.session.commit()
        logger.info("Deleted post %s", post_id)

    def add_comment(self, post_id: str, username: str, message: str) -> Post:
        post = self.get(post_id)
        _require_username(username)
        if not message:
            raise ValidationError("Path `message` is required.")

        touch(post)
        post.comments.append(Comment(username=username, message=message, commented_at=utcnow()))
        self._commit(post)
        logger.info("Comment by %s added to post %s", username, post.id)
        return post

    def like(self, post_id: str, username: str) -> Post:
        """Add username to likes; liking twice changes nothing"""
        post = self.get(post_id)
        _require_username(username)
        if username in post.likes:
            return post

        touch(post)
        # reassign so the JSON column is flagged dirty
        post.likes = [*post.likes, username]
        self._commit(post)
        logger.info("%s liked post %s", username, post.id)
        return post

    def unlike(self, post_id: str, username: str) -> Post:
        """Remove username from likes; absent usernames are ignored"""
        post = self.get(post_id)
        _require_username(username)
        if username not in post.likes:
            return post

        touch(post)
        post.likes = [user for user in post.likes if user != username]
        self._commit(post)
        logger.info("%s unliked post %s", username, post.id)
        return post


def get_post_store(session: Session = Depends(get_session)) -> PostStore:
    """Per-request post store"""
    return PostStore(session)
