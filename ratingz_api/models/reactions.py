from __future__ import annotations
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ReactionType(str, Enum):
    thumbs_up = "thumbs_up"
    thumbs_down = "thumbs_down"


class ReactionCreateRequest(BaseModel):
    reaction_type: ReactionType


class ReactionItem(BaseModel):
    movie_id: str
    reaction_type: ReactionType
    created_at: datetime


class MyReactionResponse(BaseModel):
    movie_id: str
    reaction_type: Optional[ReactionType] = None  # None = реакции нет
