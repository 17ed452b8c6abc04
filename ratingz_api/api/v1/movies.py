from uuid import UUID
from http import HTTPStatus
from typing import Optional
from fastapi import APIRouter, Depends, Query

from ratingz_api.api.http_utils import COMMON_ERRORS, handle_runtime_errors
from ratingz_api.dependencies import (
    get_movie_stats_service, get_movies_service,
)
from ratingz_api.models.movies import Movie, MovieListResponse
from ratingz_api.models.stats import MovieStats
from ratingz_api.services.movie_stats_service import MovieStatsService
from ratingz_api.services.movies_service import MoviesService

router = APIRouter(prefix="/api/v1/movies", tags=["movies"])


@router.get("", response_model=MovieListResponse, status_code=HTTPStatus.OK)
@handle_runtime_errors(COMMON_ERRORS)
async def list_movies(
    q: Optional[str] = Query(None, max_length=100,
                             description="title, year or IMDb id"),
    svc: MoviesService = Depends(get_movies_service),
):
    return await svc.list_movies(query=q)


@router.get("/{movie_id}", response_model=Movie, status_code=HTTPStatus.OK)
@handle_runtime_errors(COMMON_ERRORS)
async def get_movie(
    movie_id: UUID,
    svc: MoviesService = Depends(get_movies_service),
):
    return await svc.get_movie(str(movie_id))


@router.get("/{movie_id}/stats",
            response_model=MovieStats,
            status_code=HTTPStatus.OK)
@handle_runtime_errors(COMMON_ERRORS)
async def get_movie_stats(
    movie_id: UUID,
    svc: MovieStatsService = Depends(get_movie_stats_service),
) -> MovieStats:
    return await svc.get_stats(str(movie_id))
