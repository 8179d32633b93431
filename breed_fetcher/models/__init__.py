from .breed import SubBreedsResponse, FetchStats

__all__ = [
    "SubBreedsResponse",
    "FetchStats",
]
