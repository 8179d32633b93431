"""
Fetcher interface - contract for anything that resolves a breed to its sub-breeds.
"""

from abc import ABC, abstractmethod
from typing import List


class IBreedFetcher(ABC):
    """
    Breed fetcher interface.

    Implementations (HTTP client, in-memory table, caching decorator) are
    interchangeable wherever a fetcher is expected.
    """

    @abstractmethod
    def lookup(self, breed: str) -> List[str]:
        """
        Get the sub-breeds of a breed.

        Args:
            breed: Breed name

        Returns:
            Ordered list of sub-breed names (may be empty)

        Raises:
            BreedNotFoundError: If the breed is not recognized
        """
        pass
