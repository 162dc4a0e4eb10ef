"""Authentication use cases."""

from .common import AccountItem, AuthResponse
from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .login import LoginRequest, LoginUseCase
from .register import RegisterRequest, RegisterUseCase

__all__ = [
    "AccountItem",
    "AuthResponse",
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterUseCase",
]
