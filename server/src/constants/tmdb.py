POPULAR_PATH = "/movie/popular"
TRENDING_PATH = "/trending/movie/day"
TOP_RATED_PATH = "/movie/top_rated"
SEARCH_PATH = "/search/movie"
GENRE_LIST_PATH = "/genre/movie/list"
MOVIE_PATH = "/movie/{movie_id}"
CREDITS_PATH = "/movie/{movie_id}/credits"

UNKNOWN_GENRE = "Unknown"
UNKNOWN_DIRECTOR = "Unknown"
UNKNOWN_DURATION = "N/A"

DIRECTOR_JOB = "Director"
TOP_CAST_SIZE = 5
