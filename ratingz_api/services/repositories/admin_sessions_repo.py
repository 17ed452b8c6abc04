from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase


class AdminSessionsRepo:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.col = db["admin_sessions"]

    async def create(self, token: str, username: str,
                     expires_at: datetime) -> None:
        await self.col.insert_one({
            "token": token,
            "username": username,
            "created_at": datetime.now(timezone.utc),
            "expires_at": expires_at,
        })

    async def get(self, token: str) -> Optional[dict]:
        return await self.col.find_one({"token": token}, {"_id": 0})

    async def delete(self, token: str) -> bool:
        res = await self.col.delete_one({"token": token})
        return res.deleted_count == 1
