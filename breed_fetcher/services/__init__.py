"""Services module initialization."""

from .caching_fetcher import CachingBreedFetcher
from .dog_api_fetcher import DogApiBreedFetcher
from .local_fetcher import InMemoryBreedFetcher

__all__ = [
    "CachingBreedFetcher",
    "DogApiBreedFetcher",
    "InMemoryBreedFetcher",
]
