from http import HTTPStatus
from fastapi import APIRouter, FastAPI, Response
import sentry_sdk

from ratingz_api.core.config import settings

router = APIRouter(tags=["debug"])


@router.get("/__sentry-test", status_code=HTTPStatus.NO_CONTENT)
async def sentry_test() -> Response:
    with sentry_sdk.new_scope() as scope:
        scope.set_tag("env", settings.env)
        sentry_sdk.capture_message(
            f"sentry test ping from {settings.app_name}")
    return Response(status_code=HTTPStatus.NO_CONTENT)


def include_debug_routes(app: FastAPI) -> bool:
    # эндпоинт только при явном SENTRY_TEST_ENABLED
    if settings.sentry_test_enabled:
        app.include_router(router)
        return True
    return False
