from .entities import Post
from .exceptions import PostNotFoundError
from .repositories import PostRepository

__all__ = ["Post", "PostNotFoundError", "PostRepository"]
