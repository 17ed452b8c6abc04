from typing import List

from pydantic import BaseModel

from ratingz_api.models.movies import MovieListItem


class HomeAnalyticsResponse(BaseModel):
    top_rated: List[MovieListItem]
    most_popular: List[MovieListItem]
    recent: List[MovieListItem]
