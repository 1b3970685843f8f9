from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # TMDb settings; the API key must be set in .env for the catalog to work
    TMDB_API_KEY: str | None = None
    TMDB_BASE_URL: str = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE_URL: str = "https://image.tmdb.org/t/p/w500"
    TMDB_BACKDROP_BASE_URL: str = "https://image.tmdb.org/t/p/w1280"
    TMDB_LANGUAGE: str = "en-US"

    APP_NAME: str = "Movie Catalog"
    RECOMMENDATION_LIMIT: int = 12
    CORS_ORIGINS: list[str] = ["*"]

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
