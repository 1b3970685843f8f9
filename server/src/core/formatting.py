from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from constants.tmdb import (
    DIRECTOR_JOB,
    TOP_CAST_SIZE,
    UNKNOWN_DIRECTOR,
    UNKNOWN_DURATION,
    UNKNOWN_GENRE,
)
from models.movie import MovieDetail, MovieSummary


def extract_year(release_date: Optional[str]) -> Optional[int]:
    """Return the year of a TMDb ``YYYY-MM-DD`` date, or None if absent."""
    if not release_date:
        return None
    year = release_date.strip()[:4]
    if len(year) != 4 or not year.isdigit():
        return None
    return int(year)


def round_rating(vote_average: Optional[float]) -> float:
    """Round to one decimal with halves going up (7.25 -> 7.3)."""
    return float(
        Decimal(str(vote_average or 0)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    )


def format_duration(runtime: Optional[int]) -> str:
    return f"{runtime} min" if runtime else UNKNOWN_DURATION


def image_url(base_url: str, path: Optional[str]) -> Optional[str]:
    return f"{base_url}{path}" if path else None


def resolve_genres(genre_ids: Optional[list], genre_map: dict[int, str]) -> list[str]:
    if not genre_ids:
        return []
    return [genre_map.get(gid, UNKNOWN_GENRE) for gid in genre_ids]


def find_director(crew: Optional[list]) -> str:
    return next(
        (p["name"] for p in crew or [] if p.get("job") == DIRECTOR_JOB),
        UNKNOWN_DIRECTOR,
    )


def top_cast(cast: Optional[list]) -> list[str]:
    return [a["name"] for a in (cast or [])[:TOP_CAST_SIZE]]


def format_summary(
    movie: dict,
    genre_map: dict[int, str],
    image_base_url: str,
    backdrop_base_url: str,
) -> MovieSummary:
    """Project an upstream list entry onto the catalog summary shape.

    List endpoints only carry ``genre_ids``; they are resolved against
    ``genre_map`` and unknown ids become a placeholder label.
    """
    return MovieSummary(
        id=movie["id"],
        title=movie.get("title", ""),
        year=extract_year(movie.get("release_date")),
        rating=round_rating(movie.get("vote_average")),
        description=movie.get("overview"),
        thumbnail=image_url(image_base_url, movie.get("poster_path")),
        backdrop=image_url(backdrop_base_url, movie.get("backdrop_path")),
        popularity=movie.get("popularity"),
        duration=format_duration(movie.get("runtime")),
        genres=resolve_genres(movie.get("genre_ids"), genre_map),
    )


def format_detail(
    movie: dict,
    credits: dict,
    image_base_url: str,
    backdrop_base_url: str,
) -> MovieDetail:
    """Join a movie record with its credits into the detail shape."""
    return MovieDetail(
        id=movie["id"],
        title=movie.get("title", ""),
        year=extract_year(movie.get("release_date")),
        rating=round_rating(movie.get("vote_average")),
        description=movie.get("overview"),
        thumbnail=image_url(image_base_url, movie.get("poster_path")),
        backdrop=image_url(backdrop_base_url, movie.get("backdrop_path")),
        popularity=movie.get("popularity"),
        duration=format_duration(movie.get("runtime")),
        genres=[g["name"] for g in movie.get("genres", [])],
        director=find_director(credits.get("crew")),
        actors=top_cast(credits.get("cast")),
        budget=movie.get("budget"),
        revenue=movie.get("revenue"),
    )
