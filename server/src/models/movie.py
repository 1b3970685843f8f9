from typing import Optional

from pydantic import BaseModel, Field


class MovieSummary(BaseModel):
    id: int
    title: str
    year: Optional[int] = None
    rating: float = 0.0
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    backdrop: Optional[str] = None
    popularity: Optional[float] = None
    duration: str
    genres: list[str] = Field(default_factory=list)


class MovieDetail(MovieSummary):
    director: str
    actors: list[str] = Field(default_factory=list)
    budget: Optional[int] = None
    revenue: Optional[int] = None
