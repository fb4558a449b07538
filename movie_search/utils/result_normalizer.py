import logging
import math
from typing import Any, Dict, Optional
from pydantic import ValidationError
from ..errors import ResultParseError
from ..schemas.omdb_schemas import Item, SearchResult
from .omdb_params import parse_int

logger = logging.getLogger(__name__)

RESPONSE_KEY = 'Response'
TOTAL_RESULTS_KEY = 'totalResults'
SEARCH_KEY = 'Search'
ERROR_KEY = 'Error'

RESPONSE_TRUE = 'True'
RESPONSE_FALSE = 'False'
NOT_AVAILABLE = 'N/A'

# OMDb pages its search results by ten
MAX_RESULTS_IN_SEARCH = 10


def parse(raw: Dict[str, Any]) -> SearchResult:
    """
    Turn an OMDb search envelope into a SearchResult.

    Only an exact "True" in `Response` counts as success. "False" carries
    the upstream `Error`; any other value is also a failure, with a message
    naming what was received.

    :param raw: Decoded OMDb JSON body.
    :return: SearchResult.
    :raises ResultParseError: `Search` is not a list or an item holds
        a malformed `Year`.
    """
    response = raw.get(RESPONSE_KEY)

    if response == RESPONSE_TRUE:
        search = raw.get(SEARCH_KEY)
        if search is None:
            search = []
        if not isinstance(search, list):
            raise ResultParseError(f"Search is not a list: {search!r}")
        items = [normalize_item(i) for i in search]
        return SearchResult(
            success=True,
            total_results=total_results_number(raw.get(TOTAL_RESULTS_KEY)),
            items=tuple(items),
        )

    if response == RESPONSE_FALSE:
        error = raw.get(ERROR_KEY)
        return SearchResult(
            success=False,
            error_message=None if error is None else str(error),
        )

    logger.warning("Unexpected OMDb Response value: %r", response)
    return SearchResult(
        success=False,
        error_message=f"Unexpected OMDb response value: {response!r}",
    )


def normalize_item(raw: Dict[str, Any]) -> Item:
    """
    Map one raw OMDb search entry to an Item.

    :param raw: Entry from the `Search` list.
    :return: Item with `poster_url` set to None when OMDb says "N/A".
    :raises ResultParseError: `Year` is not an integer.
    """
    if not isinstance(raw, dict):
        raise ResultParseError(f"Search entry is not an object: {raw!r}")

    year = parse_int(raw.get('Year'))
    if year is None:
        raise ResultParseError(
            f"Malformed Year {raw.get('Year')!r} for {raw.get('imdbID')!r}"
        )

    poster = raw.get('Poster')
    try:
        return Item(
            title=raw.get('Title'),
            year=year,
            imdb_id=raw.get('imdbID'),
            type=raw.get('Type'),
            poster_url=None if poster == NOT_AVAILABLE else poster,
        )
    except ValidationError as e:
        raise ResultParseError(str(e)) from e


def total_results_number(raw: Optional[str]) -> int:
    """
    Parse `totalResults`, falling back to 0.

    :param raw: Raw `totalResults` value from OMDb.
    :return: Number of results, 0 when it cannot be parsed.
    """
    value = parse_int(raw)
    return 0 if value is None else value


def page_count(total_results: int, page_size: int = MAX_RESULTS_IN_SEARCH) -> int:
    """
    Number of OMDb pages needed to hold every result.

    :param total_results: Result count reported by OMDb.
    :param page_size: Results per page.
    :return: Page count, 0 when there are no results.
    """
    if total_results <= 0:
        return 0
    return math.ceil(total_results / page_size)
