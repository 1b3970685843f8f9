import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_tmdb_client
from config import settings
from services.tmdb import TMDBClient, TMDBError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health():
    return {
        "status": "OK",
        "tmdb_connected": bool(settings.TMDB_API_KEY),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/test")
async def connectivity_test(tmdb: TMDBClient = Depends(get_tmdb_client)):
    try:
        movies = await tmdb.popular()
    except TMDBError as e:
        logger.error("TMDb connectivity test failed: %s", e)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "TMDb API connection failed",
                "error": str(e),
            },
        )
    return {
        "success": True,
        "message": "TMDb API connected successfully!",
        "movies_count": len(movies),
    }
