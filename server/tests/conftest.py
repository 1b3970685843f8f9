import os

# Set env vars BEFORE any imports from the project happen
os.environ.setdefault("TMDB_API_KEY", "test-tmdb")
os.environ.setdefault("TMDB_BASE_URL", "https://tmdb.test/3")
os.environ.setdefault("TMDB_IMAGE_BASE_URL", "https://img.test/w500")
os.environ.setdefault("TMDB_BACKDROP_BASE_URL", "https://img.test/w1280")
