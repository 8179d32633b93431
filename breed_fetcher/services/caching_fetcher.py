"""
Caching Breed Fetcher

Memoizes an underlying IBreedFetcher in memory:
- Successful lookups are cached for the life of the instance
- Not-found lookups are NOT cached, so they hit the underlying fetcher every time
- Breed names are lowercased, so "Labrador" and "labrador" share one entry
"""

import logging
import threading
from typing import Dict, List

from ..exceptions import BreedNotFoundError
from ..interfaces.fetcher import IBreedFetcher
from ..models.breed import FetchStats

logger = logging.getLogger(__name__)


class CachingBreedFetcher(IBreedFetcher):
    """
    Caching decorator around another breed fetcher.

    Flow:
    1. Normalize the breed name (lowercase)
    2. If cached, return the stored sub-breeds
    3. On a miss, count the call and ask the underlying fetcher
    4. Store the result only if the lookup succeeded

    The number of calls made to the underlying fetcher is recorded and
    can be read with get_calls_made().
    """

    def __init__(self, fetcher: IBreedFetcher):
        """
        Initialize caching fetcher

        Args:
            fetcher: Underlying fetcher consulted on cache misses
        """
        # Private: underlying fetcher and cache storage
        self.__fetcher = fetcher
        self.__cache: Dict[str, List[str]] = {}
        self.__lock = threading.Lock()

        self.__calls_made = 0
        self.__hits = 0

    def lookup(self, breed: str) -> List[str]:
        """
        Get sub-breeds, from cache when possible (Public API)

        Args:
            breed: Breed name, any casing

        Returns:
            List of sub-breed names

        Raises:
            BreedNotFoundError: Propagated unchanged from the underlying fetcher
        """
        key = breed.lower()

        # Check-then-fetch runs under one lock so concurrent misses on the
        # same key make a single underlying call
        with self.__lock:
            if key in self.__cache:
                self.__hits += 1
                logger.debug(f"Cache HIT for breed '{key}'")
                return self.__cache[key]

            self.__calls_made += 1
            logger.debug(f"Cache MISS for breed '{key}', calling underlying fetcher")

            try:
                sub_breeds = self.__fetcher.lookup(key)
            except BreedNotFoundError:
                logger.info(f"Breed '{key}' not found, result not cached")
                raise

            self.__cache[key] = sub_breeds
            return sub_breeds

    def is_cached(self, breed: str) -> bool:
        """Check whether a breed is cached without fetching it"""
        with self.__lock:
            return breed.lower() in self.__cache

    def get_calls_made(self) -> int:
        """Number of calls made to the underlying fetcher"""
        return self.__calls_made

    def get_stats(self) -> FetchStats:
        """
        Get fetcher statistics (Public API)

        Returns:
            FetchStats with hits, calls made and cache size
        """
        with self.__lock:
            return FetchStats(
                hits=self.__hits,
                calls_made=self.__calls_made,
                size=len(self.__cache)
            )
