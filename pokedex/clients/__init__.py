"""Client modules for external API communication."""
from .pokeapi_client import (
    FetchError,
    HttpStatusError,
    MalformedDataError,
    NetworkError,
    PokeAPIClient,
)

__all__ = [
    'PokeAPIClient',
    'FetchError',
    'NetworkError',
    'HttpStatusError',
    'MalformedDataError',
]
