from uuid import UUID
from http import HTTPStatus
from fastapi import APIRouter, Depends

from ratingz_api.api.http_utils import COMMON_ERRORS, handle_runtime_errors
from ratingz_api.dependencies import get_identity, get_ratings_service
from ratingz_api.models.identity import Identity
from ratingz_api.models.ratings import (
    MyRatingResponse, RatingCreateRequest, RatingItem,
)
from ratingz_api.services.ratings_service import RatingsService

router = APIRouter(prefix="/api/v1/ratings", tags=["ratings"])

ERRMAP = {
    **COMMON_ERRORS,
    "already_rated": HTTPStatus.CONFLICT,
}


@router.post(
    "/{movie_id}",
    response_model=RatingItem,
    status_code=HTTPStatus.CREATED)
@handle_runtime_errors(ERRMAP)
async def submit_rating(
    movie_id: UUID,
    body: RatingCreateRequest,
    identity: Identity = Depends(get_identity),
    svc: RatingsService = Depends(get_ratings_service),
):
    return await svc.submit_rating(
        movie_id=str(movie_id),
        identity=identity,
        data=body)


@router.get(
    "/{movie_id}",
    response_model=MyRatingResponse,
    status_code=HTTPStatus.OK)
@handle_runtime_errors(ERRMAP)
async def get_my_rating(
    movie_id: UUID,
    identity: Identity = Depends(get_identity),
    svc: RatingsService = Depends(get_ratings_service),
) -> MyRatingResponse:
    return await svc.get_my_rating(movie_id=str(movie_id), identity=identity)
