"""
Breed Models

Wire schema for the Dog CEO sub-breed endpoint and fetcher statistics.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Union


class SubBreedsResponse(BaseModel):
    """Body returned by GET /breed/{breed}/list"""
    status: str = Field(..., description="'success' or 'error'")
    message: Union[List[str], str] = Field(..., description="Sub-breed names, or an error message")
    code: Optional[int] = Field(None, description="HTTP status echoed in error bodies")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "success",
                "message": ["afghan", "basset", "blood"],
            }
        }
    )

    @property
    def is_success(self) -> bool:
        return self.status == "success"


class FetchStats(BaseModel):
    """Statistics about a caching fetcher"""
    hits: int = 0
    calls_made: int = 0
    size: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate"""
        total = self.hits + self.calls_made
        return self.hits / total if total > 0 else 0.0
