import pytest

from movie_search.errors import ResultParseError
from movie_search.utils.result_normalizer import (
    normalize_item,
    page_count,
    parse,
    total_results_number,
)


def raw_item(**overrides):
    item = {
        "Title": "X",
        "Year": "1999",
        "imdbID": "tt1",
        "Type": "movie",
        "Poster": "N/A",
    }
    item.update(overrides)
    return item


# --- parse ---


def test_parse_success_payload():
    result = parse({
        "Response": "True",
        "Search": [raw_item()],
        "totalResults": "1",
    })
    assert result.success is True
    assert result.total_results == 1
    assert result.error_message is None
    assert len(result.items) == 1
    item = result.items[0]
    assert item.poster_url is None
    assert item.year == 1999
    assert item.title == "X"
    assert item.imdb_id == "tt1"
    assert item.type == "movie"


def test_parse_keeps_upstream_order():
    result = parse({
        "Response": "True",
        "Search": [raw_item(imdbID="tt2"), raw_item(imdbID="tt1")],
        "totalResults": "2",
    })
    assert [i.imdb_id for i in result.items] == ["tt2", "tt1"]


def test_parse_failure_payload():
    result = parse({"Response": "False", "Error": "Movie not found!"})
    assert result.success is False
    assert result.error_message == "Movie not found!"
    assert result.items == ()
    assert result.total_results == 0


@pytest.mark.parametrize("response", ["true", "TRUE", "yes", "", None, True])
def test_parse_unexpected_response_is_failure(response):
    result = parse({
        "Response": response,
        "Search": [raw_item()],
        "totalResults": "1",
    })
    assert result.success is False
    assert "Unexpected" in result.error_message


def test_parse_missing_response_is_failure():
    result = parse({"Search": [raw_item()]})
    assert result.success is False


def test_parse_malformed_total_results_degrades_to_zero():
    result = parse({
        "Response": "True",
        "Search": [raw_item()],
        "totalResults": "lots",
    })
    assert result.success is True
    assert result.total_results == 0
    assert len(result.items) == 1


def test_parse_malformed_year_is_fatal():
    with pytest.raises(ResultParseError):
        parse({
            "Response": "True",
            "Search": [raw_item(), raw_item(Year="2010–2012")],
            "totalResults": "2",
        })


def test_parse_success_without_search_list():
    result = parse({"Response": "True", "totalResults": "0"})
    assert result.success is True
    assert result.items == ()


def test_result_items_are_immutable():
    result = parse({"Response": "True", "Search": [raw_item()], "totalResults": "1"})
    with pytest.raises(Exception):
        result.items[0].title = "Y"


# --- normalize_item ---


def test_normalize_item_keeps_real_poster():
    item = normalize_item(raw_item(Poster="https://img/x.jpg"))
    assert item.poster_url == "https://img/x.jpg"


@pytest.mark.parametrize("year", ["abc", "", None, "1999-2001"])
def test_normalize_item_rejects_bad_year(year):
    with pytest.raises(ResultParseError):
        normalize_item(raw_item(Year=year))


def test_normalize_item_rejects_non_object():
    with pytest.raises(ResultParseError):
        normalize_item("tt1")


def test_normalize_item_rejects_missing_title():
    raw = raw_item()
    del raw["Title"]
    with pytest.raises(ResultParseError):
        normalize_item(raw)


# --- numbers ---


@pytest.mark.parametrize("raw,expected", [
    ("abc", 0), ("", 0), (None, 0), ("12", 12), ("3.5", 0)
])
def test_total_results_number(raw, expected):
    assert total_results_number(raw) == expected


@pytest.mark.parametrize("total,pages", [
    (0, 0), (1, 1), (10, 1), (11, 2), (25, 3), (100, 10)
])
def test_page_count(total, pages):
    assert page_count(total) == pages


# --- malformed envelopes ---


@pytest.mark.parametrize("search", [5, "tt1", {"Title": "X"}])
def test_parse_non_list_search_is_parse_error(search):
    with pytest.raises(ResultParseError):
        parse({"Response": "True", "Search": search, "totalResults": "1"})


def test_parse_non_string_error_is_stringified():
    result = parse({"Response": "False", "Error": 404})
    assert result.success is False
    assert result.error_message == "404"


def test_parse_failure_without_error_message():
    result = parse({"Response": "False"})
    assert result.success is False
    assert result.error_message is None
