import logging

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_catalog
from core.errors import CatalogError
from models.movie import MovieDetail, MovieSummary
from services.catalog import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["movies"])


@router.get("/popular", response_model=list[MovieSummary])
async def popular(catalog: CatalogService = Depends(get_catalog)):
    try:
        movies = await catalog.popular()
    except Exception as e:
        raise CatalogError("Failed to fetch popular movies") from e
    logger.info("Fetched %d popular movies from TMDb", len(movies))
    return movies


@router.get("/trending", response_model=list[MovieSummary])
async def trending(catalog: CatalogService = Depends(get_catalog)):
    try:
        movies = await catalog.trending()
    except Exception as e:
        raise CatalogError("Failed to fetch trending movies") from e
    logger.info("Fetched %d trending movies from TMDb", len(movies))
    return movies


@router.get("/search", response_model=list[MovieSummary])
async def search(
    q: str = "",
    catalog: CatalogService = Depends(get_catalog),
):
    logger.info("Searching for: %r", q)
    try:
        movies = await catalog.search(q)
    except Exception as e:
        raise CatalogError("Search failed") from e
    logger.info("Found %d movies for %r", len(movies), q)
    return movies


@router.get("/movie/{movie_id}", response_model=MovieDetail)
async def movie_detail(
    movie_id: str,
    catalog: CatalogService = Depends(get_catalog),
):
    try:
        return await catalog.detail(movie_id)
    except Exception as e:
        raise CatalogError("Failed to fetch movie details") from e


@router.get("/recommendations", response_model=list[MovieSummary])
async def recommendations(
    user_id: str = Query("1", alias="userId"),
    rec_type: str = Query("content", alias="type"),
    catalog: CatalogService = Depends(get_catalog),
):
    # rec_type is accepted for the UI's filter buttons but every type is
    # served from the top-rated list
    try:
        movies = await catalog.recommendations()
    except Exception as e:
        raise CatalogError("Failed to generate recommendations") from e
    logger.info(
        "Generated %d recommendations for user %s (type=%s)",
        len(movies),
        user_id,
        rec_type,
    )
    return movies
