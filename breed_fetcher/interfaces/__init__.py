"""
Core interface abstractions.
"""

from .fetcher import IBreedFetcher

__all__ = [
    "IBreedFetcher",
]
