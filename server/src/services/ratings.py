import logging
from typing import Any

from models.user import MovieId, User, UserId

logger = logging.getLogger(__name__)


class RatingStore:
    """In-memory per-user movie ratings.

    Nothing is persisted: users and their ratings live for the lifetime of
    the process. Writes are last-write-wins and the rating value is stored
    as submitted.
    """

    def __init__(self, seed_demo_user: bool = True) -> None:
        self._users: dict[UserId, User] = {}
        if seed_demo_user:
            self._users[1] = User(id=1, name="Demo User")

    def get_user(self, user_id: UserId) -> User | None:
        return self._users.get(user_id)

    def get_rating(self, user_id: UserId, movie_id: MovieId) -> Any:
        user = self._users.get(user_id)
        if user is None:
            return None
        return user.ratings.get(str(movie_id))

    def rate(self, user_id: UserId, movie_id: MovieId, rating: Any) -> User:
        user = self._users.get(user_id)
        if user is None:
            user = User(id=user_id, name=f"User {user_id}")
            self._users[user_id] = user
            logger.debug("Created user %s", user_id)

        user.ratings[str(movie_id)] = rating
        return user
