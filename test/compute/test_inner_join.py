import logging

import pytest

from rowalgebra.compute import build_index, inner_join, matching_rows
from rowalgebra.model import Row, Table

# Sample data for testing
LEFT_TEST_DATA = Table(
    [
        Row({"id": 1, "name": "Alice"}),
        Row({"id": 2, "name": "Bob"}),
        Row({"id": 3, "name": "Charlie"}),
        Row({"id": 4, "name": "David"}),
    ]
)

RIGHT_TEST_DATA = Table(
    [
        Row({"id": 3, "age": 25}),
        Row({"id": 4, "age": 30}),
        Row({"id": 5, "age": 35}),
        Row({"id": 6, "age": 40}),
    ]
)


@pytest.mark.parametrize(
    "left_key,right_key,expected_output",
    [
        (
            "id",
            "id",
            [
                Row({"id": 3, "name": "Charlie", "age": 25}),
                Row({"id": 4, "name": "David", "age": 30}),
            ],
        ),
    ],
)
def test_inner_join(left_key, right_key, expected_output):
    assert inner_join(left_key, right_key, LEFT_TEST_DATA, RIGHT_TEST_DATA) == expected_output


def test_inner_join_single_match():
    left = Table([Row({"id": 1, "a": "x"})])
    right = Table([Row({"id": 1, "b": "y"}), Row({"id": 2, "b": "z"})])
    assert inner_join("id", "id", left, right) == [Row({"id": 1, "a": "x", "b": "y"})]


def test_inner_join_no_match_is_empty():
    left = Table([Row({"id": 9, "a": "x"})])
    right = Table([Row({"id": 1, "b": "y"})])
    assert inner_join("id", "id", left, right) == []


def test_inner_join_missing_left_key():
    left = Table([Row({"a": "x"})])
    right = Table([Row({"id": 1, "b": "y"})])
    assert inner_join("id", "id", left, right) is None


def test_inner_join_missing_right_key():
    right = Table([Row({"id": 3, "age": 25}), Row({"age": 30})])
    assert inner_join("id", "id", LEFT_TEST_DATA, right) is None


def test_inner_join_missing_key_after_matches():
    left = Table([Row({"id": 3, "name": "Charlie"}), Row({"name": "Nobody"})])
    assert inner_join("id", "id", left, RIGHT_TEST_DATA) is None


def test_inner_join_missing_key_is_logged(caplog):
    left = Table([Row({"id": 3}), Row({"name": "Nobody"})])
    with caplog.at_level(logging.DEBUG, logger="rowalgebra"):
        inner_join("id", "id", left, RIGHT_TEST_DATA)
    assert "row 1 has no key 'id'" in caplog.text


def test_inner_join_conflicting_keys():
    left = Table(
        [
            Row({"id": 3, "name": "Charlie", "conflict": "C"}),
            Row({"id": 4, "name": "David", "conflict": "D"}),
        ]
    )
    right = Table(
        [
            Row({"id": 3, "age": 25, "conflict": "X"}),
            Row({"id": 4, "age": 30, "conflict": "Y"}),
        ]
    )
    result = inner_join("id", "id", left, right)
    assert [row["conflict"] for row in result] == ["C", "D"]
    assert set(result[0].keys()) == {"id", "name", "age", "conflict"}


def test_inner_join_different_keys():
    orders = Table(
        [
            Row({"item": "book", "id.0": "129", "qty": "1"}),
            Row({"item": "ball", "id.0": "234", "qty": "1"}),
            Row({"item": "bike", "id.0": "410", "qty": "1"}),
            Row({"item": "book", "id.0": "129", "qty": "5"}),
        ]
    )
    prices = Table(
        [
            Row({"id.1": "129", "price": "100"}),
            Row({"id.1": "234", "price": "50"}),
            Row({"id.1": "3", "price": "150"}),
            Row({"id.1": "99", "price": "30"}),
        ]
    )
    result = inner_join("id.0", "id.1", orders, prices)
    assert result == [
        Row({"item": "book", "id.0": "129", "qty": "1", "id.1": "129", "price": "100"}),
        Row({"item": "ball", "id.0": "234", "qty": "1", "id.1": "234", "price": "50"}),
        Row({"item": "book", "id.0": "129", "qty": "5", "id.1": "129", "price": "100"}),
    ]


def test_inner_join_order():
    """Result follows left rows, and right rows within each left row."""
    left = Table([Row({"k": 2, "l": "first"}), Row({"k": 1, "l": "second"})])
    right = Table(
        [
            Row({"k": 1, "r": "a"}),
            Row({"k": 2, "r": "b"}),
            Row({"k": 1, "r": "c"}),
            Row({"k": 2, "r": "d"}),
        ]
    )
    result = inner_join("k", "k", left, right)
    assert [(row["l"], row["r"]) for row in result] == [
        ("first", "b"),
        ("first", "d"),
        ("second", "a"),
        ("second", "c"),
    ]


def test_inner_join_accepts_iterables():
    left = (row for row in LEFT_TEST_DATA)
    right = iter(list(RIGHT_TEST_DATA))
    assert len(inner_join("id", "id", left, right)) == 2


def test_inner_join_with_none_values():
    left = Table([Row({"id": None, "name": "Charlie"}), Row({"id": 4, "name": "David"})])
    right = Table([Row({"id": None, "age": 35}), Row({"id": 4, "age": 30})])
    # None is a regular value, rows holding it match each other.
    result = inner_join("id", "id", left, right)
    assert [row["name"] for row in result] == ["Charlie", "David"]


def test_build_index():
    index = build_index("id", [Row({"id": 1, "v": "a"}), Row({"id": 2}), Row({"id": 1, "v": "b"})])
    assert index == {
        1: [Row({"id": 1, "v": "a"}), Row({"id": 1, "v": "b"})],
        2: [Row({"id": 2})],
    }


def test_build_index_missing_key():
    assert build_index("id", [Row({"id": 1}), Row({"v": "a"})]) is None


def test_build_index_unhashable_value():
    with pytest.raises(TypeError):
        build_index("id", [Row({"id": [1, 2]})])


def test_matching_rows():
    assert matching_rows("id", 4, RIGHT_TEST_DATA) == [Row({"id": 4, "age": 30})]
    assert matching_rows("id", 9, RIGHT_TEST_DATA) == []
    assert matching_rows("age", 30, [Row({"id": 1})]) is None
