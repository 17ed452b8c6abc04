from http import HTTPStatus
from fastapi import APIRouter, Depends

from ratingz_api.api.http_utils import COMMON_ERRORS, handle_runtime_errors
from ratingz_api.dependencies import get_analytics_service
from ratingz_api.models.analytics import HomeAnalyticsResponse
from ratingz_api.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/api/v1/analytics", tags=["analytics"])


@router.get("/home",
            response_model=HomeAnalyticsResponse,
            status_code=HTTPStatus.OK)
@handle_runtime_errors(COMMON_ERRORS)
async def home_analytics(
    svc: AnalyticsService = Depends(get_analytics_service),
):
    return await svc.home()
