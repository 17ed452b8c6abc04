from __future__ import annotations
from typing import List

from pydantic import BaseModel


class CategoryAverage(BaseModel):
    category: str
    average: float
    count: int


class MovieStats(BaseModel):
    movie_id: str
    total_ratings: int = 0
    average_overall: float = 0.0
    average_story: float = 0.0
    average_screenplay: float = 0.0
    average_direction: float = 0.0
    average_performance: float = 0.0
    average_music: float = 0.0
    thumbs_up: int = 0
    thumbs_down: int = 0
    # сколько оценок 1..5 звёзд (индекс 0 = одна звезда)
    distribution: List[int] = [0, 0, 0, 0, 0]
    categories: List[CategoryAverage] = []
