from models.movie import MovieDetail, MovieSummary
from models.user import User

__all__ = ["MovieDetail", "MovieSummary", "User"]
