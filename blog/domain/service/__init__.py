"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .comment_service import CommentService, build_comment_forest, normalize_content
from .jwt_service import JWTService
from .post_service import PostPage, PostService
from .reaction_service import ReactionResult, ReactionService, ReactionSummary
from .user_service import UserService, normalize_username

__all__ = [
    "AuthService",
    "CommentService",
    "JWTService",
    "PostPage",
    "PostService",
    "ReactionResult",
    "ReactionService",
    "ReactionSummary",
    "Service",
    "UserService",
    "build_comment_forest",
    "normalize_content",
    "normalize_username",
]
