import logging
from functools import wraps
from http import HTTPStatus
from fastapi import HTTPException

logger = logging.getLogger(__name__)

# бизнес-коды, общие для всех роутеров
COMMON_ERRORS: dict[str, HTTPStatus] = {
    "movie_not_found": HTTPStatus.NOT_FOUND,
}


def handle_runtime_errors(mapping: dict[str, HTTPStatus]):
    """
    Переводит RuntimeError с «текстовыми кодами» в HTTPException.
    Пример mapping: {"already_rated": 409, "movie_not_found": 404}
    """
    def decorator(fn):
        @wraps(fn)
        async def wrapper(*args, **kwargs):
            try:
                return await fn(*args, **kwargs)
            except RuntimeError as e:
                msg = str(e)
                for key, status in mapping.items():
                    if msg == key or msg.startswith(f"{key}:"):
                        raise HTTPException(status_code=status, detail=key)
                # нераспознанное -> 500, детали только в лог
                logger.error("unhandled_service_error", extra={"err": msg})
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail="internal_error")
        return wrapper
    return decorator

