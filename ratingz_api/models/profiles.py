from __future__ import annotations
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ratingz_api.models.ratings import RatingItem
from ratingz_api.models.reactions import ReactionItem


class ProfileUpsertRequest(BaseModel):
    email: Optional[str] = Field(default=None, max_length=320)
    full_name: Optional[str] = Field(default=None, max_length=200)
    avatar_url: Optional[str] = None


class UserProfile(BaseModel):
    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    updated_at: datetime


class MovieRef(BaseModel):
    id: str
    title: str
    year: int
    poster_url: Optional[str] = None


class ProfileRating(RatingItem):
    movie: Optional[MovieRef] = None


class ProfileReaction(ReactionItem):
    movie: Optional[MovieRef] = None


class ProfileResponse(BaseModel):
    profile: UserProfile
    ratings: List[ProfileRating]
    reactions: List[ProfileReaction]
    total_ratings: int
    average_rating: float
    thumbs_up: int
    thumbs_down: int
