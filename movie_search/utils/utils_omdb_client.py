import asyncio
import logging
from typing import Any, Dict, List, Optional, Tuple
import httpx
from ..config import settings
from ..errors import GatewayTimeoutError, ServiceUnavailableError
from .omdb_params import Param, wire_name

logger = logging.getLogger(__name__)

_API_KEY_WIRE = wire_name(Param.API_KEY)


def omdb_base_url() -> str:
    """Build the OMDb data URL from the configured host and sub-host."""
    return f"https://{settings.OMDB_DATA_SUB_HOST}.{settings.OMDB_HOST}/"


def _loggable(params: List[Tuple[str, str]]) -> List[Tuple[str, str]]:
    return [(k, '***' if k == _API_KEY_WIRE else v) for k, v in params]


async def fetch_search(
    client: httpx.AsyncClient,
    params: List[Tuple[str, str]],
    timeout: Optional[float] = None
) -> Dict[str, Any]:
    """
    Issue a single GET to OMDb and decode the JSON body.
    The whole call, body included, is bounded by `timeout`.

    :param client: HTTP client for making API requests.
    :param params: Serialized (wire name, value) query pairs.
    :param timeout: Seconds to wait, defaults to OMDB_TIMEOUT.
    :return: Decoded JSON object.
    :raises GatewayTimeoutError: no answer within the bound.
    :raises ServiceUnavailableError: transport, HTTP status or decoding failure.
    """
    bound = settings.OMDB_TIMEOUT if timeout is None else timeout
    url = omdb_base_url()
    logger.debug("GET %s params=%s", url, _loggable(params))

    try:
        resp = await asyncio.wait_for(client.get(url, params=params), bound)
        resp.raise_for_status()
        data = resp.json()
    except (asyncio.TimeoutError, httpx.TimeoutException) as e:
        logger.warning("OMDb did not answer within %.1fs", bound)
        raise GatewayTimeoutError(
            "The movie service did not answer in time!") from e
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("OMDb request failed: %s", e)
        raise ServiceUnavailableError(
            f"Movie service error: {e}") from e

    if not isinstance(data, dict):
        raise ServiceUnavailableError(
            "Movie service error: unexpected response body")
    return data
