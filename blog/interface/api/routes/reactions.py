"""Reaction routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Response, status
from pydantic import BaseModel

from blog.application.usecase.reaction import (
    GetReactionsRequest,
    GetReactionsResponse,
    GetReactionsUseCase,
    GetUserReactionRequest,
    GetUserReactionResponse,
    GetUserReactionUseCase,
    ReactRequest,
    ReactResponse,
    ReactUseCase,
    RemoveReactionRequest,
    RemoveReactionUseCase,
)
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.domain.value import ReactionAction, ReactionType
from blog.interface.api.security import require_user_id
from blog.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["reactions"], route_class=DishkaRoute)


class ReactAPIRequest(BaseModel):
    """API request for reacting to a post."""

    type: ReactionType


@router.get("/{post_id}/reactions", response_model=GetReactionsResponse)
async def get_reactions(
    post_id: int,
    get_reactions_use_case: FromDishka[GetReactionsUseCase],
) -> GetReactionsResponse:
    """Get reaction counts for a post, by type."""
    try:
        return await get_reactions_use_case.execute(
            GetReactionsRequest(post_id=post_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{post_id}/reactions/me", response_model=GetUserReactionResponse)
async def get_user_reaction(
    post_id: int,
    get_user_reaction_use_case: FromDishka[GetUserReactionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetUserReactionResponse:
    """Get the authenticated user's reaction on a post."""
    user_id = require_user_id(
        jwt_service, auth_token, authorization, "view your reaction"
    )
    return await get_user_reaction_use_case.execute(
        GetUserReactionRequest(post_id=post_id, user_id=user_id)
    )


@router.post("/{post_id}/reactions", response_model=ReactResponse)
async def react(
    post_id: int,
    request: ReactAPIRequest,
    response: Response,
    react_use_case: FromDishka[ReactUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ReactResponse:
    """Add, switch or toggle off a reaction.

    Reacting with the type already held removes it. A newly added
    reaction answers 201, other outcomes 200.
    """
    user_id = require_user_id(jwt_service, auth_token, authorization, "react")

    try:
        result = await react_use_case.execute(
            ReactRequest(post_id=post_id, user_id=user_id, type=request.type)
        )
    except DomainError as e:
        raise to_http_exception(e)

    if result.action == ReactionAction.ADDED:
        response.status_code = status.HTTP_201_CREATED
    return result


@router.delete("/{post_id}/reactions", status_code=status.HTTP_204_NO_CONTENT)
async def remove_reaction(
    post_id: int,
    remove_reaction_use_case: FromDishka[RemoveReactionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> None:
    """Remove the authenticated user's reaction from a post."""
    user_id = require_user_id(
        jwt_service, auth_token, authorization, "remove reactions"
    )

    try:
        await remove_reaction_use_case.execute(
            RemoveReactionRequest(post_id=post_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
