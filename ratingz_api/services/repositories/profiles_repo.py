from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument


class ProfilesRepo:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.col = db["user_profiles"]

    async def upsert(self, user_id: str, fields: Dict[str, Any]) -> dict:
        now = datetime.now(timezone.utc)
        return await self.col.find_one_and_update(
            {"id": user_id},
            {
                "$set": {**fields, "updated_at": now},
                "$setOnInsert": {"created_at": now},
            },
            upsert=True,
            return_document=ReturnDocument.AFTER,
            projection={"_id": 0},
        )

    async def get(self, user_id: str) -> Optional[dict]:
        return await self.col.find_one({"id": user_id}, {"_id": 0})
