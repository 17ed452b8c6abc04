import logging

from fastapi import FastAPI
from pymongo.errors import PyMongoError

from contextlib import asynccontextmanager
from ratingz_api.db.indexes import ensure_indexes
from ratingz_api.db.mongo import close_client, get_mongo_db

from ratingz_api.core.http_client import close_http_client
from ratingz_api.core.logger import setup_json_logging, shutdown_logging
from ratingz_api.core.sentry import init_sentry
from ratingz_api.core.config import settings
from ratingz_api.core.middleware import RequestContextMiddleware

from ratingz_api.api.v1.movies import router as movies_router
from ratingz_api.api.v1.ratings import router as ratings_router
from ratingz_api.api.v1.reactions import router as reactions_router
from ratingz_api.api.v1.identity import router as identity_router
from ratingz_api.api.v1.analytics import router as analytics_router
from ratingz_api.api.v1.profiles import router as profiles_router
from ratingz_api.api.v1.admin import router as admin_router
from ratingz_api.api.v1.debug import include_debug_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 1) логи до всего
    setup_json_logging(service=settings.app_name)
    init_sentry(settings.sentry_dsn, environment=settings.env)

    # 2) Motor-клиент + индексы: уникальность оценок держится на них
    db = await get_mongo_db()
    try:
        await ensure_indexes(db)
    except PyMongoError as e:
        # без монги сервис всё равно поднимается, /health отвечает
        logger.error("ensure_indexes_failed", extra={"err": str(e)})

    try:
        yield
    finally:
        await close_http_client()
        await close_client()
        shutdown_logging()


app = FastAPI(title="Ratingz Service", lifespan=lifespan)

# наш trace_id + access JSON
app.add_middleware(RequestContextMiddleware)

# приглушим штатный uvicorn-access, чтобы не было дублей
logging.getLogger("uvicorn.access").setLevel("WARNING")

include_debug_routes(app)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(movies_router)
app.include_router(ratings_router)
app.include_router(reactions_router)
app.include_router(identity_router)
app.include_router(analytics_router)
app.include_router(profiles_router)
app.include_router(admin_router)
