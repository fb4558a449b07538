import re
from enum import Enum
from typing import Dict, FrozenSet, Optional


class Param(Enum):
    SEARCH = 'search'
    TITLE = 'title'
    IMDB_ID = 'imdbId'
    TYPE = 'type'
    PLOT = 'plot'
    YEAR = 'year'
    PAGE = 'page'
    RETURN_FORMAT = 'returnFormat'
    VERSION = 'version'
    API_KEY = 'apiKey'


class TypeValue(str, Enum):
    MOVIE = 'movie'
    SERIES = 'series'
    EPISODE = 'episode'


class PlotValue(str, Enum):
    SHORT = 'short'
    FULL = 'full'


class ReturnFormatValue(str, Enum):
    JSON = 'json'
    XML = 'xml'


API_VERSION = '1'

# Query string names understood by OMDb
WIRE_NAMES: Dict[Param, str] = {
    Param.SEARCH: 's',
    Param.TITLE: 't',
    Param.IMDB_ID: 'i',
    Param.TYPE: 'type',
    Param.PLOT: 'plot',
    Param.YEAR: 'y',
    Param.PAGE: 'page',
    Param.RETURN_FORMAT: 'r',
    Param.VERSION: 'v',
    Param.API_KEY: 'apikey',
}

REQUIRED_PARAMS: FrozenSet[Param] = frozenset(
    {Param.SEARCH, Param.TITLE, Param.IMDB_ID}
)

# Only settable when the param set is built
CONSTRUCTION_ONLY_PARAMS: FrozenSet[Param] = REQUIRED_PARAMS | {Param.API_KEY}

VALUE_SETS: Dict[Param, FrozenSet[str]] = {
    Param.TYPE: frozenset(v.value for v in TypeValue),
    Param.PLOT: frozenset(v.value for v in PlotValue),
    Param.RETURN_FORMAT: frozenset(v.value for v in ReturnFormatValue),
}

_INT_RE = re.compile(r'[+-]?[0-9]+')


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Strict integer parsing: an optional sign followed by ASCII digits.

    :param value: Raw string.
    :return: The integer, or None when the string is not one.
    """
    if not isinstance(value, str) or not _INT_RE.fullmatch(value):
        return None
    return int(value)


def wire_name(param: Param) -> str:
    """
    Look up the query string name OMDb expects for a parameter.

    :param param: Parameter variant.
    :return: Wire name, e.g. "s" for Param.SEARCH.
    """
    return WIRE_NAMES[param]
