from uuid import UUID
from http import HTTPStatus
from fastapi import APIRouter, Depends

from ratingz_api.api.http_utils import COMMON_ERRORS, handle_runtime_errors
from ratingz_api.dependencies import get_identity, get_reactions_service
from ratingz_api.models.identity import Identity
from ratingz_api.models.reactions import (
    MyReactionResponse, ReactionCreateRequest, ReactionItem,
)
from ratingz_api.services.reactions_service import ReactionsService

router = APIRouter(prefix="/api/v1/reactions", tags=["reactions"])

ERRMAP = {
    **COMMON_ERRORS,
    "already_reacted": HTTPStatus.CONFLICT,
}


@router.get(
    "/{movie_id}",
    response_model=MyReactionResponse,
    status_code=HTTPStatus.OK)
@handle_runtime_errors(ERRMAP)
async def get_my_reaction(
    movie_id: UUID,
    identity: Identity = Depends(get_identity),
    svc: ReactionsService = Depends(get_reactions_service),
) -> MyReactionResponse:
    return await svc.get_my_reaction(str(movie_id), identity)


@router.post(
    "/{movie_id}",
    response_model=ReactionItem,
    status_code=HTTPStatus.CREATED)
@handle_runtime_errors(ERRMAP)
async def submit_reaction(
    movie_id: UUID,
    body: ReactionCreateRequest,
    identity: Identity = Depends(get_identity),
    svc: ReactionsService = Depends(get_reactions_service),
):
    return await svc.submit_reaction(
        str(movie_id), identity, body.reaction_type)
