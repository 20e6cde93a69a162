import os


def _positive_int(name: str, default: int) -> int:
    """Reads an integer setting that must be at least 1."""
    value = int(os.getenv(name, str(default)))
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


# Upstream API (read-only, unauthenticated)
POKEAPI_BASE_URL = os.getenv("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2")
REQUEST_TIMEOUT = float(os.getenv("POKEDEX_REQUEST_TIMEOUT", "5.0"))

# The list screen fetches one fixed batch up front and paginates it in memory
FETCH_LIMIT = _positive_int("POKEDEX_FETCH_LIMIT", 100)
PAGE_SIZE = _positive_int("POKEDEX_PAGE_SIZE", 10)

# Language tag used to pick flavor text and genus entries
DESCRIPTION_LANGUAGE = os.getenv("POKEDEX_LANGUAGE", "en")
