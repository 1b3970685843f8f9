import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

from api.health import router as health_router
from api.movies import router as movies_router
from api.ratings import router as ratings_router
from config import settings
from core.errors import CatalogError, catalog_error_handler
from services.ratings import RatingStore
from services.tmdb import TMDBClient

logger = logging.getLogger("uvicorn.error")

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.tmdb = TMDBClient(
        api_key=settings.TMDB_API_KEY,
        base_url=settings.TMDB_BASE_URL,
        language=settings.TMDB_LANGUAGE,
    )
    app.state.ratings = RatingStore()

    if settings.TMDB_API_KEY:
        logger.info("TMDb ready: base_url=%s", settings.TMDB_BASE_URL)
    else:
        logger.warning("TMDB_API_KEY is not set, catalog requests will fail")

    yield
    await app.state.tmdb.aclose()


app = FastAPI(title=settings.APP_NAME, version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        return response


app.add_middleware(SecurityHeadersMiddleware)

app.add_exception_handler(CatalogError, catalog_error_handler)

app.include_router(health_router)
app.include_router(movies_router)
app.include_router(ratings_router)

# Mounted last so the API routes take precedence
app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")
