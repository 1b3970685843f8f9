import asyncio
import logging
from typing import Awaitable, Optional

from core.formatting import format_detail, format_summary
from models.movie import MovieDetail, MovieSummary
from services.tmdb import TMDBClient

logger = logging.getLogger(__name__)


class CatalogService:
    """Aggregates TMDb calls into the catalog's response shapes.

    Every list fetch pulls the genre mapping alongside the results; nothing
    is cached between requests.
    """

    def __init__(
        self,
        tmdb: TMDBClient,
        image_base_url: str,
        backdrop_base_url: str,
        recommendation_limit: int = 12,
    ):
        self.tmdb = tmdb
        self.image_base_url = image_base_url
        self.backdrop_base_url = backdrop_base_url
        self.recommendation_limit = recommendation_limit

    async def _with_genres(
        self, fetch: Awaitable[list[dict]]
    ) -> tuple[list[dict], dict[int, str]]:
        results, genre_map = await asyncio.gather(fetch, self.tmdb.genres())
        return results, genre_map

    def _summaries(
        self, results: list[dict], genre_map: dict[int, str]
    ) -> list[MovieSummary]:
        return [
            format_summary(m, genre_map, self.image_base_url, self.backdrop_base_url)
            for m in results
        ]

    async def popular(self) -> list[MovieSummary]:
        results, genre_map = await self._with_genres(self.tmdb.popular())
        return self._summaries(results, genre_map)

    async def trending(self) -> list[MovieSummary]:
        results, genre_map = await self._with_genres(self.tmdb.trending())
        return self._summaries(results, genre_map)

    async def search(self, query: Optional[str]) -> list[MovieSummary]:
        if not query or not query.strip():
            return await self.popular()

        results, genre_map = await self._with_genres(self.tmdb.search(query))
        # Entries without a poster can't be rendered as cards
        results = [m for m in results if m.get("poster_path")]
        return self._summaries(results, genre_map)

    async def recommendations(self) -> list[MovieSummary]:
        results, genre_map = await self._with_genres(self.tmdb.top_rated())
        return self._summaries(results[: self.recommendation_limit], genre_map)

    async def detail(self, movie_id: int | str) -> MovieDetail:
        movie, credits = await asyncio.gather(
            self.tmdb.movie(movie_id), self.tmdb.credits(movie_id)
        )
        return format_detail(
            movie, credits, self.image_base_url, self.backdrop_base_url
        )
