from __future__ import annotations
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class MovieCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=300)
    year: int = Field(..., ge=1870, le=2100)
    poster_url: Optional[str] = None
    imdb_id: Optional[str] = Field(default=None, max_length=32)


class MovieUpdateRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    year: Optional[int] = Field(default=None, ge=1870, le=2100)
    poster_url: Optional[str] = None
    imdb_id: Optional[str] = Field(default=None, max_length=32)

    @model_validator(mode="before")
    @classmethod
    def reject_null_required(cls, data):
        # title и year у фильма обязательны: null не затирает их
        if isinstance(data, dict):
            for name in ("title", "year"):
                if name in data and data[name] is None:
                    raise ValueError(f"{name} must not be null")
        return data


class Movie(BaseModel):
    id: str
    title: str
    year: int
    poster_url: Optional[str] = None
    imdb_id: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class MovieListItem(Movie):
    average_rating: float = 0.0
    total_ratings: int = 0
    thumbs_up: int = 0
    thumbs_down: int = 0


class MovieListResponse(BaseModel):
    items: List[MovieListItem]
    total: int


class MovieDeleteResponse(BaseModel):
    ok: bool
    deleted_ratings: int
    deleted_reactions: int
