"""
Unit tests for DogApiBreedFetcher.

The HTTP session is mocked; no network access is needed.
"""

import pytest
import requests
from unittest.mock import MagicMock

from breed_fetcher.exceptions import BreedNotFoundError, BreedServiceError
from breed_fetcher.services.caching_fetcher import CachingBreedFetcher
from breed_fetcher.services.dog_api_fetcher import DogApiBreedFetcher


def make_response(status_code: int, body):
    """Helper to build a mocked requests.Response"""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def fetcher(session):
    return DogApiBreedFetcher(base_url="https://dog.example/api/", timeout=3.0, session=session)


class TestDogApiBreedFetcher:
    """Response handling for the /breed/{breed}/list endpoint."""

    def test_success_returns_sub_breeds(self, fetcher, session):
        session.get.return_value = make_response(200, {
            "message": ["afghan", "basset", "blood"],
            "status": "success",
        })

        assert fetcher.lookup("hound") == ["afghan", "basset", "blood"]
        session.get.assert_called_once_with("https://dog.example/api/breed/hound/list", timeout=3.0)

    def test_success_with_no_sub_breeds(self, fetcher, session):
        session.get.return_value = make_response(200, {"message": [], "status": "success"})
        assert fetcher.lookup("labrador") == []

    def test_breed_name_is_url_quoted(self, fetcher, session):
        session.get.return_value = make_response(200, {"message": [], "status": "success"})
        fetcher.lookup("a/b c")
        session.get.assert_called_once_with("https://dog.example/api/breed/a%2Fb%20c/list", timeout=3.0)

    def test_not_found(self, fetcher, session):
        session.get.return_value = make_response(404, {
            "status": "error",
            "message": "Breed not found (main breed does not exist)",
            "code": 404,
        })

        with pytest.raises(BreedNotFoundError) as exc_info:
            fetcher.lookup("bogus")

        assert exc_info.value.breed == "bogus"
        assert "Breed not found" in str(exc_info.value)

    def test_connection_error(self, fetcher, session):
        session.get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(BreedServiceError) as exc_info:
            fetcher.lookup("hound")

        assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)

    def test_timeout(self, fetcher, session):
        session.get.side_effect = requests.exceptions.Timeout("slow")
        with pytest.raises(BreedServiceError):
            fetcher.lookup("hound")

    def test_non_json_body(self, fetcher, session):
        response = make_response(502, None)
        response.json.side_effect = ValueError("Expecting value")
        session.get.return_value = response

        with pytest.raises(BreedServiceError):
            fetcher.lookup("hound")

    def test_malformed_body(self, fetcher, session):
        session.get.return_value = make_response(200, {"unexpected": True})
        with pytest.raises(BreedServiceError):
            fetcher.lookup("hound")

    def test_server_error_is_not_not_found(self, fetcher, session):
        session.get.return_value = make_response(500, {
            "status": "error",
            "message": "Internal error",
            "code": 500,
        })

        with pytest.raises(BreedServiceError) as exc_info:
            fetcher.lookup("hound")

        assert not isinstance(exc_info.value, BreedNotFoundError)

    def test_defaults_from_settings(self):
        fetcher = DogApiBreedFetcher()
        assert fetcher.base_url == "https://dog.ceo/api"
        assert fetcher.timeout == 10.0
        assert isinstance(fetcher.session, requests.Session)


class TestCachedDogApi:
    """The HTTP fetcher behind a caching fetcher."""

    def test_repeated_lookup_makes_one_request(self, fetcher, session):
        session.get.return_value = make_response(200, {"message": ["golden"], "status": "success"})
        cached = CachingBreedFetcher(fetcher)

        assert cached.lookup("Retriever") == ["golden"]
        assert cached.lookup("retriever") == ["golden"]

        assert session.get.call_count == 1
        assert cached.get_calls_made() == 1

    def test_not_found_requests_every_time(self, fetcher, session):
        session.get.return_value = make_response(404, {
            "status": "error",
            "message": "Breed not found (main breed does not exist)",
            "code": 404,
        })
        cached = CachingBreedFetcher(fetcher)

        for _ in range(2):
            with pytest.raises(BreedNotFoundError):
                cached.lookup("bogus")

        assert session.get.call_count == 2
        assert cached.get_calls_made() == 2
