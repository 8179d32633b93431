"""Breed Fetcher - cached sub-breed lookups for the Dog CEO API."""

from .exceptions import BreedFetcherError, BreedNotFoundError, BreedServiceError
from .interfaces import IBreedFetcher
from .models import FetchStats, SubBreedsResponse
from .services import CachingBreedFetcher, DogApiBreedFetcher, InMemoryBreedFetcher

__all__ = [
    # Interfaces
    "IBreedFetcher",
    # Fetchers
    "CachingBreedFetcher",
    "DogApiBreedFetcher",
    "InMemoryBreedFetcher",
    # Models
    "FetchStats",
    "SubBreedsResponse",
    # Errors
    "BreedFetcherError",
    "BreedNotFoundError",
    "BreedServiceError",
]
