"""
In-memory breed fetcher for offline runs and tests.
"""

from typing import Dict, List, Optional

from ..exceptions import BreedNotFoundError
from ..interfaces.fetcher import IBreedFetcher


# Small built-in table used by the CLI's --offline mode
DEFAULT_BREEDS: Dict[str, List[str]] = {
    "hound": ["afghan", "basset", "blood", "english", "ibizan", "plott", "walker"],
    "retriever": ["chesapeake", "curly", "flatcoated", "golden"],
    "terrier": ["american", "australian", "bedlington", "border", "irish", "welsh"],
    "spaniel": ["blenheim", "brittany", "cocker", "irish", "japanese", "sussex", "welsh"],
    "labrador": [],
    "poodle": ["medium", "miniature", "standard", "toy"],
}


class InMemoryBreedFetcher(IBreedFetcher):
    """Breed fetcher backed by a fixed dictionary (exact-match names)"""

    def __init__(self, breeds: Optional[Dict[str, List[str]]] = None):
        self._breeds = dict(DEFAULT_BREEDS if breeds is None else breeds)

    def lookup(self, breed: str) -> List[str]:
        if breed not in self._breeds:
            raise BreedNotFoundError(breed)
        return list(self._breeds[breed])
