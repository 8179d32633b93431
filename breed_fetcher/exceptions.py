"""
Error types raised by breed fetchers.
"""

from typing import Optional


class BreedFetcherError(Exception):
    """Base exception for breed fetcher errors."""

    def __init__(self, message: str, breed: Optional[str] = None):
        self.message = message
        self.breed = breed
        super().__init__(message)


class BreedNotFoundError(BreedFetcherError):
    """The requested breed is unknown to the data source."""

    def __init__(self, breed: str, message: Optional[str] = None):
        super().__init__(message or f"Breed '{breed}' not found", breed=breed)


class BreedServiceError(BreedFetcherError):
    """The data source could not be reached or answered with something unusable."""
