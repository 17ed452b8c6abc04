"""Admin gate: a configured credential pair and server-side sessions."""

from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta, timezone

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from ratingz_api.core.config import settings
from ratingz_api.models.admin import AdminLoginResponse
from ratingz_api.services.repositories.admin_sessions_repo import (
    AdminSessionsRepo,
)

logger = logging.getLogger(__name__)


def credentials_match(username: str, password: str) -> bool:
    """Constant-time comparison with the configured pair."""
    user_ok = secrets.compare_digest(
        username.encode('utf-8'), settings.admin_username.encode('utf-8'))
    pass_ok = secrets.compare_digest(
        password.encode('utf-8'), settings.admin_password.encode('utf-8'))
    return user_ok and pass_ok


class AdminService:
    """Issue, check and revoke admin session tokens."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.repo = AdminSessionsRepo(db)

    async def login(self, username: str, password: str) -> AdminLoginResponse:
        if not credentials_match(username, password):
            logger.warning('admin_login_rejected')
            raise RuntimeError('invalid_credentials')

        token = secrets.token_urlsafe(32)
        expires_at = datetime.now(timezone.utc) + timedelta(
            minutes=settings.admin_session_ttl_min)
        try:
            await self.repo.create(token, username, expires_at)
        except PyMongoError as error:
            logger.error('admin_session_create_failed',
                         extra={'err': str(error)})
            raise RuntimeError(
                f'mongo_admin_session_error: {error}') from error
        logger.info('admin_login')
        return AdminLoginResponse(token=token, expires_at=expires_at)

    async def is_valid(self, token: str | None) -> bool:
        """True when the token names a live session."""
        if not token:
            return False
        try:
            doc = await self.repo.get(token)
            if doc is None:
                return False
            expires_at = doc['expires_at']
            if expires_at.tzinfo is None:
                # mongo без tz_aware отдаёт naive UTC
                expires_at = expires_at.replace(tzinfo=timezone.utc)
            if expires_at <= datetime.now(timezone.utc):
                await self.repo.delete(token)
                return False
        except PyMongoError as error:
            logger.error('admin_session_check_failed',
                         extra={'err': str(error)})
            raise RuntimeError(
                f'mongo_admin_session_error: {error}') from error
        return True

    async def logout(self, token: str | None) -> bool:
        if not token:
            return False
        try:
            return await self.repo.delete(token)
        except PyMongoError as error:
            logger.error('admin_logout_failed', extra={'err': str(error)})
            raise RuntimeError(
                f'mongo_admin_session_error: {error}') from error
