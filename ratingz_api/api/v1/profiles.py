from http import HTTPStatus
from fastapi import APIRouter, Depends

from ratingz_api.api.http_utils import handle_runtime_errors
from ratingz_api.dependencies import get_profiles_service, user_id_header
from ratingz_api.models.profiles import (
    ProfileResponse, ProfileUpsertRequest, UserProfile,
)
from ratingz_api.services.profiles_service import ProfilesService

router = APIRouter(prefix="/api/v1/profiles", tags=["profiles"])

ERRMAP = {
    "profile_not_found": HTTPStatus.NOT_FOUND,
}


@router.put("/me", response_model=UserProfile, status_code=HTTPStatus.OK)
@handle_runtime_errors(ERRMAP)
async def upsert_my_profile(
    body: ProfileUpsertRequest,
    user_id: str = Depends(user_id_header),
    svc: ProfilesService = Depends(get_profiles_service),
):
    return await svc.upsert_profile(user_id, body)


@router.get("/me", response_model=ProfileResponse, status_code=HTTPStatus.OK)
@handle_runtime_errors(ERRMAP)
async def get_my_profile(
    user_id: str = Depends(user_id_header),
    svc: ProfilesService = Depends(get_profiles_service),
):
    return await svc.get_profile(user_id)
