"""Reaction use cases."""

from .get_reactions import (
    GetReactionsRequest,
    GetReactionsResponse,
    GetReactionsUseCase,
    GetUserReactionRequest,
    GetUserReactionResponse,
    GetUserReactionUseCase,
)
from .react import (
    ReactRequest,
    ReactResponse,
    ReactUseCase,
    RemoveReactionRequest,
    RemoveReactionUseCase,
)

__all__ = [
    "GetReactionsRequest",
    "GetReactionsResponse",
    "GetReactionsUseCase",
    "GetUserReactionRequest",
    "GetUserReactionResponse",
    "GetUserReactionUseCase",
    "ReactRequest",
    "ReactResponse",
    "ReactUseCase",
    "RemoveReactionRequest",
    "RemoveReactionUseCase",
]
