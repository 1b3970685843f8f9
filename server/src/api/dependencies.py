from fastapi import Depends, Request

from config import settings
from services.catalog import CatalogService
from services.ratings import RatingStore
from services.tmdb import TMDBClient


def get_tmdb_client(request: Request) -> TMDBClient:
    return request.app.state.tmdb


def get_rating_store(request: Request) -> RatingStore:
    return request.app.state.ratings


def get_catalog(tmdb: TMDBClient = Depends(get_tmdb_client)) -> CatalogService:
    return CatalogService(
        tmdb,
        image_base_url=settings.TMDB_IMAGE_BASE_URL,
        backdrop_base_url=settings.TMDB_BACKDROP_BASE_URL,
        recommendation_limit=settings.RECOMMENDATION_LIMIT,
    )
