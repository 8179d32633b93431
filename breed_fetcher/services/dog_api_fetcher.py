"""
Dog API Breed Fetcher

Resolves sub-breeds through the public Dog CEO API (https://dog.ceo/dog-api/).

    GET {base_url}/breed/{breed}/list

    200 {"message": ["afghan", "basset", ...], "status": "success"}
    404 {"status": "error", "message": "Breed not found (main breed does not exist)", "code": 404}
"""

import logging
from typing import List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from ..config import settings
from ..exceptions import BreedNotFoundError, BreedServiceError
from ..interfaces.fetcher import IBreedFetcher
from ..models.breed import SubBreedsResponse

logger = logging.getLogger(__name__)


class DogApiBreedFetcher(IBreedFetcher):
    """
    Breed fetcher backed by the Dog CEO HTTP API.

    Every lookup is a network round trip; wrap it in a CachingBreedFetcher
    to avoid repeated requests for the same breed.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize Dog API fetcher

        Args:
            base_url: API root (default: settings.dog_api_base_url)
            timeout: Request timeout in seconds (default: settings.request_timeout)
            session: requests session to reuse (default: a new one)
        """
        self.base_url = (base_url or settings.dog_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.session = session or requests.Session()

    def lookup(self, breed: str) -> List[str]:
        """
        Fetch the sub-breeds of a breed from the API (Public API)

        Args:
            breed: Breed name as understood by the API (lowercase)

        Returns:
            List of sub-breed names in API order

        Raises:
            BreedNotFoundError: If the API reports the breed does not exist
            BreedServiceError: On network failures or unexpected responses
        """
        url = f"{self.base_url}/breed/{quote(breed, safe='')}/list"
        logger.debug(f"GET {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request for breed '{breed}' failed: {e}")
            raise BreedServiceError(f"Request for breed '{breed}' failed: {e}", breed=breed) from e

        try:
            body = SubBreedsResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Unexpected response for breed '{breed}' (HTTP {response.status_code}): {e}")
            raise BreedServiceError(
                f"Unexpected response for breed '{breed}' (HTTP {response.status_code})",
                breed=breed
            ) from e

        if body.is_success and isinstance(body.message, list):
            return list(body.message)

        if response.status_code == 404 or body.code == 404:
            message = body.message if isinstance(body.message, str) else None
            raise BreedNotFoundError(breed, message)

        logger.error(f"Dog API error for breed '{breed}' (HTTP {response.status_code}): {body.message}")
        raise BreedServiceError(
            f"Dog API error for breed '{breed}' (HTTP {response.status_code}): {body.message}",
            breed=breed
        )
