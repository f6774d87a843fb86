import logging

import pytest

from rowalgebra.compute import filter_by_elem, filter_rows
from rowalgebra.model import Row, Table

TEST_DATA = Table(
    [
        Row({"animals": "Flamingo", "n_legs": 2}),
        Row({"animals": "Horse", "n_legs": 4}),
        Row({"animals": "Brittle stars", "n_legs": 5}),
        Row({"animals": "Snake"}),
        Row({"animals": "Centipede", "n_legs": 100}),
    ]
)


def test_filter_rows_preserves_order():
    result = filter_rows(lambda row: len(row["animals"]) > 5, TEST_DATA)
    assert [row["animals"] for row in result] == ["Flamingo", "Brittle stars", "Centipede"]


def test_filter_rows_no_match_returns_none():
    assert filter_rows(lambda row: False, TEST_DATA) is None


def test_filter_rows_no_match_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="rowalgebra"):
        filter_rows(lambda row: False, TEST_DATA)
    assert "discarded all 5 rows" in caplog.text


def test_filter_rows_all_match():
    assert filter_rows(lambda row: True, TEST_DATA) == TEST_DATA


@pytest.mark.parametrize(
    "predicate,expected",
    [
        (lambda v: v >= 5, ["Brittle stars", "Centipede"]),
        (lambda v: v == 4, ["Horse"]),
        (lambda v: v % 2 == 0, ["Flamingo", "Horse", "Centipede"]),
    ],
)
def test_filter_by_elem(predicate, expected):
    result = filter_by_elem(predicate, "n_legs", TEST_DATA)
    assert [row["animals"] for row in result] == expected


def test_filter_by_elem_skips_missing_column():
    # Snake has no n_legs, a predicate accepting None would otherwise select it.
    result = filter_by_elem(lambda v: v is None, "n_legs", TEST_DATA)
    assert result is None


def test_filter_by_elem_unknown_column():
    assert filter_by_elem(lambda v: True, "wings", TEST_DATA) is None


def test_filter_is_idempotent():
    def predicate(v):
        return v > 3

    once = filter_by_elem(predicate, "n_legs", TEST_DATA)
    twice = filter_by_elem(predicate, "n_legs", once)
    assert once == twice


def test_filter_does_not_modify_input():
    source = list(TEST_DATA)
    filter_rows(lambda row: row["animals"] == "Horse", TEST_DATA)
    assert list(TEST_DATA) == source
