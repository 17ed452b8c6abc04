from __future__ import annotations
from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, Field

from ratingz_api.models.movies import Movie


class AdminLoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminLoginResponse(BaseModel):
    token: str
    expires_at: datetime


class AdminSessionResponse(BaseModel):
    authenticated: bool


class AdminLogoutResponse(BaseModel):
    ok: bool


class AdminMovieItem(Movie):
    ratings_count: int = 0
    reactions_count: int = 0
    average_rating: float = 0.0


class AdminTotals(BaseModel):
    total_movies: int
    total_ratings: int
    total_reactions: int
    average_rating: float


class AdminDashboardResponse(BaseModel):
    stats: AdminTotals
    movies: List[AdminMovieItem]


class TopRatedItem(BaseModel):
    id: str
    title: str
    rating: float
    count: int


class MostRatedItem(BaseModel):
    id: str
    title: str
    ratings: int
    reactions: int


class RatingRangeItem(BaseModel):
    range: str
    count: int


class AdminAnalyticsResponse(BaseModel):
    top_rated: List[TopRatedItem]
    most_rated: List[MostRatedItem]
    by_decade: Dict[str, int]
    rating_ranges: List[RatingRangeItem]
