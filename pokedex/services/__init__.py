"""Fetch orchestration on top of the PokeAPI client."""
from .collection_fetcher import CollectionFetcher
from .detail_loader import DetailLoader

__all__ = [
    'CollectionFetcher',
    'DetailLoader',
]
