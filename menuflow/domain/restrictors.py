"""
Restrictors - Reusable Validation Predicates

Factory functions returning predicates for the RequiringService. Each
predicate receives an already-parsed value and answers "is this value
acceptable?". They are pure and can be shared between states.
"""

from typing import Any, Callable

from ..services.exceptions import InvalidRestrictorError

Predicate = Callable[[Any], bool]


# ==============================================================================
# String restrictors
# ==============================================================================


def must_start_with(prefix: str) -> Predicate:
    return lambda value: value.startswith(prefix)


def must_end_with(suffix: str) -> Predicate:
    return lambda value: value.endswith(suffix)


def must_not_include(*forbidden: str) -> Predicate:
    """Rejects values that contain any of the forbidden substrings."""
    return lambda value: not any(text in value for text in forbidden)


def must_be_one_of(*allowed: str) -> Predicate:
    allowed_set = frozenset(allowed)
    return lambda value: value in allowed_set


def must_be_one_of_ignore_case(*allowed: str) -> Predicate:
    allowed_set = frozenset(text.casefold() for text in allowed)
    return lambda value: value.casefold() in allowed_set


def min_length(minimum: int) -> Predicate:
    return lambda value: len(value) >= minimum


def max_length(maximum: int) -> Predicate:
    return lambda value: len(value) <= maximum


# ==============================================================================
# Numerical restrictors
# ==============================================================================


def in_range(minimum: Any, maximum: Any) -> Predicate:
    """
    Accepts values within [minimum, maximum], both ends inclusive.
    Works for int, float and Decimal alike.
    """
    if minimum > maximum:
        raise InvalidRestrictorError(f"Empty range: minimum {minimum} > maximum {maximum}")
    return lambda value: minimum <= value <= maximum


def at_least(minimum: Any) -> Predicate:
    return lambda value: value >= minimum


def at_most(maximum: Any) -> Predicate:
    return lambda value: value <= maximum
