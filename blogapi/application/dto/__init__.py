from .posts import PostCreatePayload, PostPayload
from .users import SignInPayload, UserPayload

__all__ = ["PostCreatePayload", "PostPayload", "SignInPayload", "UserPayload"]
