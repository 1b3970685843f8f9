import logging
from typing import Optional
from urllib.parse import quote

import httpx

from constants.tmdb import (
    CREDITS_PATH,
    GENRE_LIST_PATH,
    MOVIE_PATH,
    POPULAR_PATH,
    SEARCH_PATH,
    TOP_RATED_PATH,
    TRENDING_PATH,
)

logger = logging.getLogger(__name__)


def _segment(value: int | str) -> str:
    # ids come straight from the request path; keep them inside one segment
    return quote(str(value), safe="")


class TMDBError(Exception):
    """Raised for any failed call to the TMDb API."""


class TMDBClient:
    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        language: str = "en-US",
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.language = language
        self.client = client or httpx.AsyncClient(timeout=10.0)

    async def _get(self, path: str, **params) -> dict:
        params = {"api_key": self.api_key, "language": self.language, **params}
        try:
            response = await self.client.get(f"{self.base_url}{path}", params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise TMDBError(
                f"TMDb returned {e.response.status_code} for {path}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise TMDBError(f"TMDb request to {path} failed: {e}") from e

    async def popular(self) -> list[dict]:
        data = await self._get(POPULAR_PATH, page=1)
        return data.get("results", [])

    async def trending(self) -> list[dict]:
        data = await self._get(TRENDING_PATH)
        return data.get("results", [])

    async def top_rated(self) -> list[dict]:
        data = await self._get(TOP_RATED_PATH, page=1)
        return data.get("results", [])

    async def search(self, query: str) -> list[dict]:
        data = await self._get(
            SEARCH_PATH, query=query, page=1, include_adult="false"
        )
        return data.get("results", [])

    async def genres(self) -> dict[int, str]:
        data = await self._get(GENRE_LIST_PATH)
        return {g["id"]: g["name"] for g in data.get("genres", [])}

    async def movie(self, movie_id: int | str) -> dict:
        return await self._get(MOVIE_PATH.format(movie_id=_segment(movie_id)))

    async def credits(self, movie_id: int | str) -> dict:
        return await self._get(CREDITS_PATH.format(movie_id=_segment(movie_id)))

    async def aclose(self) -> None:
        await self.client.aclose()
