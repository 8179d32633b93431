#!/usr/bin/env python3
"""
Look up sub-breeds from the command line.

Usage:
    breed-fetcher hound retriever HOUND
    breed-fetcher --offline labrador bogus
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import settings
from .exceptions import BreedNotFoundError, BreedServiceError
from .interfaces.fetcher import IBreedFetcher
from .services.caching_fetcher import CachingBreedFetcher
from .services.dog_api_fetcher import DogApiBreedFetcher
from .services.local_fetcher import InMemoryBreedFetcher

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_SERVICE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Look up dog sub-breeds, caching successful results"
    )
    parser.add_argument(
        "breeds",
        nargs="+",
        metavar="BREED",
        help="Breed names to look up (case-insensitive)",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=settings.dog_api_base_url,
        help="Dog CEO API root",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.request_timeout,
        help="HTTP timeout in seconds",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Use the built-in breed table instead of the API",
    )
    return parser


def format_sub_breeds(breed: str, sub_breeds: List[str]) -> str:
    if not sub_breeds:
        return f"{breed}: (no sub-breeds)"
    return f"{breed}: {', '.join(sub_breeds)}"


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    source: IBreedFetcher
    if args.offline:
        source = InMemoryBreedFetcher()
    else:
        source = DogApiBreedFetcher(base_url=args.base_url, timeout=args.timeout)
    fetcher = CachingBreedFetcher(source)

    exit_code = EXIT_OK
    for breed in args.breeds:
        try:
            sub_breeds = fetcher.lookup(breed)
        except BreedNotFoundError:
            print(f"{breed}: not found")
            exit_code = EXIT_NOT_FOUND
            continue
        except BreedServiceError as e:
            logger.error(f"Giving up: {e}")
            return EXIT_SERVICE_ERROR
        print(format_sub_breeds(breed, sub_breeds))

    stats = fetcher.get_stats()
    print(
        f"\n{len(args.breeds)} lookups, {fetcher.get_calls_made()} underlying calls, "
        f"hit rate {stats.hit_rate:.0%}"
    )
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
