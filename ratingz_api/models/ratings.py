from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

CATEGORIES = ('story', 'screenplay', 'direction', 'performance', 'music')


class RatingCreateRequest(BaseModel):
    overall: int = Field(..., ge=1, le=5)
    story: Optional[int] = Field(default=None, ge=1, le=5)
    screenplay: Optional[int] = Field(default=None, ge=1, le=5)
    direction: Optional[int] = Field(default=None, ge=1, le=5)
    performance: Optional[int] = Field(default=None, ge=1, le=5)
    music: Optional[int] = Field(default=None, ge=1, le=5)


class RatingItem(BaseModel):
    movie_id: str
    overall_rating: int
    story_rating: Optional[int] = None
    screenplay_rating: Optional[int] = None
    direction_rating: Optional[int] = None
    performance_rating: Optional[int] = None
    music_rating: Optional[int] = None
    created_at: datetime


class MyRatingResponse(BaseModel):
    movie_id: str
    rating: Optional[RatingItem]  # None если ещё не оценивал
