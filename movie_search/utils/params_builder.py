from datetime import date
from typing import (
    Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union
)
from ..errors import ParamStateError, ParamValueError
from .omdb_params import (
    API_VERSION,
    CONSTRUCTION_ONLY_PARAMS,
    REQUIRED_PARAMS,
    VALUE_SETS,
    Param,
    ReturnFormatValue,
    parse_int,
    wire_name,
)

ParamEntries = Union[Mapping[Param, str], Iterable[Tuple[Param, str]]]


def system_year() -> int:
    """
    Default clock for year validation.

    :return: The current calendar year.
    """
    return date.today().year


class ParamSet:
    """
    Ordered OMDb query parameters, one value per parameter.

    Overwriting a value keeps the parameter where it was first inserted.
    Two sets are equal when they serialize to the same query.
    """

    def __init__(self) -> None:
        self._values: Dict[Param, str] = {}

    def get(self, param: Param) -> Optional[str]:
        return self._values.get(param)

    def items(self) -> Tuple[Tuple[Param, str], ...]:
        return tuple(self._values.items())

    def serialize(self) -> List[Tuple[str, str]]:
        """
        :return: (wire name, value) pairs in insertion order.
        """
        return [(wire_name(p), v) for p, v in self._values.items()]

    def _put(self, param: Param, value: str) -> None:
        self._values[param] = value

    def __contains__(self, param: object) -> bool:
        return param in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParamSet):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __hash__(self) -> int:
        return hash(tuple(self.serialize()))

    def __repr__(self) -> str:
        return f"ParamSet({self.serialize()!r})"


class ParamBuilder:
    """
    Builds a ParamSet around exactly one required parameter
    (search, title or IMDb id) and validates everything added afterwards.

    The current year used to bound `year` comes from `current_year`,
    so callers can pin the clock.
    """

    def __init__(
        self,
        required_kind: Param,
        required_value: str,
        api_key: Optional[str] = None,
        current_year: Callable[[], int] = system_year
    ) -> None:
        if required_kind not in REQUIRED_PARAMS:
            raise ParamStateError(
                f'"{required_kind.value}" is not a required param!'
            )
        if not required_value:
            raise ParamValueError(
                f'Required param "{required_kind.value}" must not be empty!'
            )

        self._current_year = current_year
        self._params = ParamSet()
        self._params._put(required_kind, required_value)
        self._params._put(Param.RETURN_FORMAT, ReturnFormatValue.JSON.value)
        self._params._put(Param.VERSION, API_VERSION)
        if api_key:
            self._params._put(Param.API_KEY, api_key)

    @property
    def params(self) -> ParamSet:
        return self._params

    def add(self, name: Param, value: str) -> ParamSet:
        """
        Validate and set an optional parameter.
        An existing value is replaced in place, a new one is appended.

        :param name: Parameter to set.
        :param value: Wire value.
        :return: The updated ParamSet.
        :raises ParamStateError: name is a required param or the API key.
        :raises ParamValueError: value is not a string or not legal for name.
        """
        if name in CONSTRUCTION_ONLY_PARAMS:
            raise ParamStateError('Required params are set on instantiation!')

        if not isinstance(value, str):
            raise ParamValueError(
                f'Given param "{wire_name(name)}" value {value!r} '
                f'is not a string!'
            )

        validator = self._validators().get(name)
        if validator is not None and not validator(value):
            raise ParamValueError(
                f'Given param "{wire_name(name)}" value "{value}" '
                f'is not a legal type!'
            )

        self._params._put(name, value)
        return self._params

    def add_all(self, entries: ParamEntries) -> ParamSet:
        """
        Apply `add` to each entry in order. The first invalid entry raises;
        entries applied before it are kept.
        """
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        for name, value in pairs:
            self.add(name, value)
        return self._params

    def serialize(self) -> List[Tuple[str, str]]:
        return self._params.serialize()

    def _validators(self) -> Dict[Param, Callable[[str], bool]]:
        return {
            Param.TYPE: lambda v: v in VALUE_SETS[Param.TYPE],
            Param.PLOT: lambda v: v in VALUE_SETS[Param.PLOT],
            Param.RETURN_FORMAT: lambda v: v in VALUE_SETS[Param.RETURN_FORMAT],
            Param.YEAR: self._is_valid_year,
            Param.PAGE: _is_valid_page,
        }

    def _is_valid_year(self, value: str) -> bool:
        year = parse_int(value)
        return year is not None and 1 <= year <= self._current_year()


def _is_valid_page(value: str) -> bool:
    page = parse_int(value)
    return page is not None and page >= 1


def build_for_search(
    search: str,
    api_key: Optional[str] = None,
    current_year: Callable[[], int] = system_year
) -> ParamBuilder:
    """
    Start a param set for a free text search (`s`).

    :param search: Search phrase.
    :param api_key: Optional OMDb API key.
    :param current_year: Clock bounding the `year` param.
    :return: ParamBuilder seeded with the search phrase.
    """
    return ParamBuilder(Param.SEARCH, search, api_key, current_year)


def build_for_title(
    title: str,
    api_key: Optional[str] = None,
    current_year: Callable[[], int] = system_year
) -> ParamBuilder:
    """
    Start a param set for an exact title lookup (`t`).

    :param title: Title to look up.
    :param api_key: Optional OMDb API key.
    :param current_year: Clock bounding the `year` param.
    :return: ParamBuilder seeded with the title.
    """
    return ParamBuilder(Param.TITLE, title, api_key, current_year)


def build_for_imdb_id(
    imdb_id: str,
    api_key: Optional[str] = None,
    current_year: Callable[[], int] = system_year
) -> ParamBuilder:
    """
    Start a param set for an IMDb id lookup (`i`).

    :param imdb_id: IMDb identifier, e.g. tt0133093.
    :param api_key: Optional OMDb API key.
    :param current_year: Clock bounding the `year` param.
    :return: ParamBuilder seeded with the IMDb id.
    """
    return ParamBuilder(Param.IMDB_ID, imdb_id, api_key, current_year)
