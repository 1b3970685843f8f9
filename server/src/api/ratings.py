import logging
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.dependencies import get_rating_store
from core.errors import CatalogError
from models.user import MovieId, UserId
from services.ratings import RatingStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["ratings"])


class RatingSubmission(BaseModel):
    user_id: UserId = Field(alias="userId")
    movie_id: MovieId = Field(alias="movieId")
    rating: Any = None


@router.post("/rate")
async def rate_movie(
    submission: RatingSubmission,
    store: RatingStore = Depends(get_rating_store),
):
    try:
        store.rate(submission.user_id, submission.movie_id, submission.rating)
    except Exception as e:
        raise CatalogError("Failed to save rating") from e
    logger.info(
        "User %s rated movie %s with %s stars",
        submission.user_id,
        submission.movie_id,
        submission.rating,
    )
    return {"success": True, "message": "Rating saved successfully"}
