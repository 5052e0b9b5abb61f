from decimal import Decimal

import pytest

from menuflow.domain import restrictors
from menuflow.services.exceptions import InvalidRestrictorError


@pytest.mark.parametrize(
    ("predicate", "value", "expected"),
    [
        (restrictors.must_start_with("ab"), "abc", True),
        (restrictors.must_start_with("ab"), "cab", False),
        (restrictors.must_end_with(".txt"), "notes.txt", True),
        (restrictors.must_end_with(".txt"), "notes.md", False),
        (restrictors.must_not_include("/", "\\"), "plain", True),
        (restrictors.must_not_include("/", "\\"), "a/b", False),
        (restrictors.must_be_one_of("yes", "no"), "no", True),
        (restrictors.must_be_one_of("yes", "no"), "No", False),
        (restrictors.must_be_one_of_ignore_case("yes", "no"), "YES", True),
        (restrictors.must_be_one_of_ignore_case("yes", "no"), "maybe", False),
        (restrictors.min_length(3), "abc", True),
        (restrictors.min_length(3), "ab", False),
        (restrictors.max_length(3), "abc", True),
        (restrictors.max_length(3), "abcd", False),
    ],
)
def test_string_restrictors(predicate, value: str, expected: bool) -> None:
    assert predicate(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, False), (1, True), (5, True), (10, True), (11, False)],
)
def test_in_range_is_inclusive(value: int, expected: bool) -> None:
    assert restrictors.in_range(1, 10)(value) is expected


def test_numeric_restrictors_accept_decimals_and_floats() -> None:
    assert restrictors.in_range(Decimal("0.5"), Decimal("1.5"))(Decimal("1.0"))
    assert restrictors.at_least(2.5)(2.5)
    assert not restrictors.at_least(2.5)(2.4)
    assert restrictors.at_most(0)(-3)
    assert not restrictors.at_most(0)(1)


def test_in_range_rejects_empty_range() -> None:
    with pytest.raises(InvalidRestrictorError):
        restrictors.in_range(5, 1)
