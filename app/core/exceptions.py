class PostStoreError(Exception):
    """Base class for errors raised by the post store"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PostStoreError):
    """Input violates a post or comment constraint"""


class NotFound(PostStoreError):
    """Requested post does not exist"""

    def __init__(self, message: str = "Post not found"):
        super().__init__(message)
