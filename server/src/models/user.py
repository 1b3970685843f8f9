from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

UserId = int | str
MovieId = int | str


@dataclass
class User:
    id: UserId
    name: str
    # keyed by str(movie_id) so 550 and "550" are the same movie
    ratings: dict[str, Any] = field(default_factory=dict)
