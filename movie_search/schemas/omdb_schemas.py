from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict


class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    year: int
    imdb_id: str
    type: str
    poster_url: Optional[str]


class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    total_results: int = 0
    items: Tuple[Item, ...] = ()
    error_message: Optional[str] = None


class SearchResponse(BaseModel):
    search: List[Item]


class ErrorResponse(BaseModel):
    detail: str
