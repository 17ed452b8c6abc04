from typing import Optional
from uuid import UUID

import httpx
from fastapi import Depends, Header, HTTPException, Request, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from ratingz_api.api.http_utils import handle_runtime_errors
from ratingz_api.core.config import settings
from ratingz_api.core.http_client import get_http_client
from ratingz_api.db.mongo import get_mongo_db
from ratingz_api.models.identity import Identity
from ratingz_api.services.admin_service import AdminService
from ratingz_api.services.analytics_service import AnalyticsService
from ratingz_api.services.identity_service import IdentityService
from ratingz_api.services.movie_stats_service import MovieStatsService
from ratingz_api.services.movies_service import MoviesService
from ratingz_api.services.profiles_service import ProfilesService
from ratingz_api.services.ratings_service import RatingsService
from ratingz_api.services.reactions_service import ReactionsService

ADMIN_TOKEN_HEADER = "X-Admin-Token"
MAX_DEVICE_ID_LEN = 128


def user_id_header(x_user_id: str = Header(..., alias="X-User-Id")) -> str:
    return _normalize_user_id(x_user_id)


def _normalize_user_id(value: str) -> str:
    try:
        return str(UUID(value))  # валидируем и нормализуем
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Invalid X-User-Id")


async def get_db() -> AsyncIOMotorDatabase:
    return await get_mongo_db()


def get_outbound_http() -> httpx.AsyncClient:
    return get_http_client()


def get_identity_service(
        http: httpx.AsyncClient = Depends(get_outbound_http),
) -> IdentityService:
    return IdentityService(
        http=http,
        lookup_url=settings.ip_lookup_url,
        timeout=settings.ip_lookup_timeout,
    )


async def get_identity(
        request: Request,
        x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
        x_device_id: Optional[str] = Header(None, alias="X-Device-Id"),
        x_fingerprint: Optional[str] = Header(None, alias="X-Fingerprint"),
        svc: IdentityService = Depends(get_identity_service),
) -> Identity:
    """Signed-in user id wins; otherwise device id + IP (+ fingerprint)."""
    if x_user_id:
        return svc.for_user(_normalize_user_id(x_user_id))

    device_id = (x_device_id or "").strip()
    if not device_id:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="missing_identity")
    if len(device_id) > MAX_DEVICE_ID_LEN:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Invalid X-Device-Id")

    ip = await svc.resolve_ip(
        forwarded_for=request.headers.get("X-Forwarded-For"),
        real_ip=request.headers.get("X-Real-IP"),
        peer=request.client.host if request.client else None,
    )
    return svc.for_device(device_id, ip, x_fingerprint)


async def get_movies_service(db=Depends(get_db)) -> MoviesService:
    return MoviesService(db)


async def get_movie_stats_service(db=Depends(get_db)) -> MovieStatsService:
    return MovieStatsService(db)


async def get_ratings_service(db=Depends(get_db)) -> RatingsService:
    return RatingsService(db)


async def get_reactions_service(db=Depends(get_db)) -> ReactionsService:
    return ReactionsService(db)


async def get_analytics_service(db=Depends(get_db)) -> AnalyticsService:
    return AnalyticsService(db)


async def get_profiles_service(db=Depends(get_db)) -> ProfilesService:
    return ProfilesService(db)


async def get_admin_service(db=Depends(get_db)) -> AdminService:
    return AdminService(db)


def admin_token_header(
        x_admin_token: Optional[str] = Header(None, alias=ADMIN_TOKEN_HEADER),
) -> Optional[str]:
    return x_admin_token


@handle_runtime_errors({})
async def require_admin(
        token: Optional[str] = Depends(admin_token_header),
        svc: AdminService = Depends(get_admin_service),
) -> str:
    if not await svc.is_valid(token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="admin_session_required")
    return token
