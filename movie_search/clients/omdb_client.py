import logging
from typing import Callable, List, Optional, Tuple
import httpx
from ..config import settings
from ..errors import (
    BadRequestError,
    NotFoundError,
    ParamValueError,
    ResultParseError,
    UnprocessableEntityError,
)
from ..schemas.omdb_schemas import SearchResponse
from ..utils.omdb_params import Param
from ..utils.params_builder import ParamBuilder, build_for_search, system_year
from ..utils.result_normalizer import MAX_RESULTS_IN_SEARCH, page_count, parse
from ..utils.utils_omdb_client import fetch_search

logger = logging.getLogger(__name__)


async def search_omdb(
    filter: str,
    type: Optional[str] = None,
    year: Optional[str] = None,
    page: Optional[str] = None
) -> SearchResponse:
    """
    Search OMDb by a free text filter, optionally narrowed by type, year
    and page. Each call builds its own params and its own HTTP client;
    one request is made and nothing is retried.

    :param filter: Search phrase, required.
    :param type: One of movie, series, episode.
    :param year: Release year.
    :param page: Result page, starting at 1.
    :return: SearchResponse holding the normalized items.
    :raises BadRequestError: filter is empty.
    :raises UnprocessableEntityError: a param value is illegal or OMDb
        returned an item that cannot be normalized.
    :raises NotFoundError: OMDb reports no results.
    :raises ServiceUnavailableError: OMDb could not be reached.
    :raises GatewayTimeoutError: OMDb did not answer in time.
    """
    builder = build_search_params(filter, type, year, page)

    async with httpx.AsyncClient(timeout=settings.OMDB_TIMEOUT) as client:
        return await _search_with_client(client, builder)


def build_search_params(
    filter: str,
    type: Optional[str] = None,
    year: Optional[str] = None,
    page: Optional[str] = None,
    current_year: Callable[[], int] = system_year
) -> ParamBuilder:
    """
    Validate the search inputs and build the OMDb params for them.
    Empty optional values are left out.
    """
    if not filter:
        raise BadRequestError('Missing param "filter"! Unable to make a search!')

    optional: List[Tuple[Param, Optional[str]]] = [
        (Param.TYPE, type),
        (Param.YEAR, year),
        (Param.PAGE, page),
    ]
    try:
        builder = build_for_search(filter, settings.OMDB_API_KEY, current_year)
        builder.add_all((p, v) for p, v in optional if v)
    except ParamValueError as e:
        raise UnprocessableEntityError(str(e)) from e
    return builder


async def _search_with_client(
    client: httpx.AsyncClient,
    builder: ParamBuilder
) -> SearchResponse:
    """
    Run the request for already built params and normalize the answer.

    :param client: HTTP client for making API requests.
    :param builder: ParamBuilder holding a search param set.
    :return: SearchResponse holding the normalized items.
    """
    data = await fetch_search(client, builder.serialize())

    try:
        result = parse(data)
    except ResultParseError as e:
        raise UnprocessableEntityError(str(e)) from e

    if not result.success:
        logger.info("No OMDb results: %s", result.error_message)
        raise NotFoundError("No results for the given filter were found!")

    if result.total_results > MAX_RESULTS_IN_SEARCH:
        logger.debug(
            "OMDb holds %d results over %d pages",
            result.total_results, page_count(result.total_results)
        )

    return SearchResponse(search=list(result.items))
