from uuid import UUID
from http import HTTPStatus
from fastapi import APIRouter, Depends

from ratingz_api.api.http_utils import COMMON_ERRORS, handle_runtime_errors
from ratingz_api.dependencies import (
    admin_token_header,
    get_admin_service,
    get_analytics_service,
    get_movies_service,
    require_admin,
)
from ratingz_api.models.admin import (
    AdminAnalyticsResponse,
    AdminDashboardResponse,
    AdminLoginRequest,
    AdminLoginResponse,
    AdminLogoutResponse,
    AdminSessionResponse,
)
from ratingz_api.models.movies import (
    Movie, MovieCreateRequest, MovieDeleteResponse, MovieUpdateRequest,
)
from ratingz_api.services.admin_service import AdminService
from ratingz_api.services.analytics_service import AnalyticsService
from ratingz_api.services.movies_service import MoviesService

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])

ERRMAP = {
    **COMMON_ERRORS,
    "invalid_credentials": HTTPStatus.UNAUTHORIZED,
}


# ---------- сессия ----------

@router.post("/login",
             response_model=AdminLoginResponse,
             status_code=HTTPStatus.OK)
@handle_runtime_errors(ERRMAP)
async def login(
    body: AdminLoginRequest,
    svc: AdminService = Depends(get_admin_service),
):
    return await svc.login(body.username, body.password)


@router.get("/session",
            response_model=AdminSessionResponse,
            status_code=HTTPStatus.OK)
@handle_runtime_errors(ERRMAP)
async def session_state(
    token: str | None = Depends(admin_token_header),
    svc: AdminService = Depends(get_admin_service),
) -> AdminSessionResponse:
    return AdminSessionResponse(authenticated=await svc.is_valid(token))


@router.post("/logout",
             response_model=AdminLogoutResponse,
             status_code=HTTPStatus.OK)
@handle_runtime_errors(ERRMAP)
async def logout(
    token: str | None = Depends(admin_token_header),
    svc: AdminService = Depends(get_admin_service),
) -> AdminLogoutResponse:
    return AdminLogoutResponse(ok=await svc.logout(token))


# ---------- каталог ----------

@router.post("/movies",
             response_model=Movie,
             status_code=HTTPStatus.CREATED,
             dependencies=[Depends(require_admin)])
@handle_runtime_errors(ERRMAP)
async def create_movie(
    body: MovieCreateRequest,
    svc: MoviesService = Depends(get_movies_service),
):
    return await svc.create_movie(body)


@router.patch("/movies/{movie_id}",
              response_model=Movie,
              status_code=HTTPStatus.OK,
              dependencies=[Depends(require_admin)])
@handle_runtime_errors(ERRMAP)
async def update_movie(
    movie_id: UUID,
    body: MovieUpdateRequest,
    svc: MoviesService = Depends(get_movies_service),
):
    return await svc.update_movie(str(movie_id), body)


@router.delete("/movies/{movie_id}",
               response_model=MovieDeleteResponse,
               status_code=HTTPStatus.OK,
               dependencies=[Depends(require_admin)])
@handle_runtime_errors(ERRMAP)
async def delete_movie(
    movie_id: UUID,
    svc: MoviesService = Depends(get_movies_service),
):
    return await svc.delete_movie(str(movie_id))


# ---------- аналитика ----------

@router.get("/dashboard",
            response_model=AdminDashboardResponse,
            status_code=HTTPStatus.OK,
            dependencies=[Depends(require_admin)])
@handle_runtime_errors(ERRMAP)
async def dashboard(
    svc: AnalyticsService = Depends(get_analytics_service),
):
    return await svc.admin_dashboard()


@router.get("/analytics",
            response_model=AdminAnalyticsResponse,
            status_code=HTTPStatus.OK,
            dependencies=[Depends(require_admin)])
@handle_runtime_errors(ERRMAP)
async def analytics(
    svc: AnalyticsService = Depends(get_analytics_service),
):
    return await svc.admin_analytics()
