from http import HTTPStatus
import pytest
from ratingz_api.api.http_utils import handle_runtime_errors
from fastapi import HTTPException


async def test_handle_runtime_errors_maps_known_code():
    @handle_runtime_errors({"already_rated": HTTPStatus.CONFLICT})
    async def fn():
        raise RuntimeError("already_rated")
    with pytest.raises(HTTPException) as e:
        await fn()
    assert e.value.status_code == HTTPStatus.CONFLICT
    assert e.value.detail == "already_rated"


async def test_handle_runtime_errors_maps_code_with_details():
    @handle_runtime_errors({"boom": HTTPStatus.BAD_REQUEST})
    async def fn():
        raise RuntimeError("boom: extra context")
    with pytest.raises(HTTPException) as e:
        await fn()
    assert e.value.status_code == HTTPStatus.BAD_REQUEST


async def test_handle_runtime_errors_maps_unknown_to_500():
    @handle_runtime_errors({"movie_not_found": HTTPStatus.NOT_FOUND})
    async def fn():
        raise RuntimeError("mongo_rating_insert_error: movie_not_found")
    with pytest.raises(HTTPException) as e:
        await fn()
    assert e.value.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert e.value.detail == "internal_error"


async def test_handle_runtime_errors_happy_path_returns_value():
    @handle_runtime_errors({"x": HTTPStatus.BAD_REQUEST})
    async def ok():
        return "ok"
    assert await ok() == "ok"
