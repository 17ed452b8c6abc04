from http import HTTPStatus
from fastapi import APIRouter, Depends

from ratingz_api.dependencies import get_identity
from ratingz_api.models.identity import DeviceIdResponse, Identity
from ratingz_api.services.identity_service import generate_device_id

router = APIRouter(prefix="/api/v1/identity", tags=["identity"])


@router.post("/device",
             response_model=DeviceIdResponse,
             status_code=HTTPStatus.CREATED)
async def new_device_id() -> DeviceIdResponse:
    # клиент хранит его сам (localStorage "ratingz_device_id")
    return DeviceIdResponse(device_id=generate_device_id())


@router.get("", response_model=Identity, status_code=HTTPStatus.OK)
async def whoami(identity: Identity = Depends(get_identity)) -> Identity:
    return identity
