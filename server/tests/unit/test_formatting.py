import math

import pytest

from engcalc.services.formatting import as_number, format_fixed, format_number, reciprocal, round_to


@pytest.mark.parametrize(
    ("value", "places", "expected"),
    [
        (5.710593137499643, 2, 5.71),
        (0.09966865249116204, 4, 0.0997),
        (-0.00001, 2, 0.0),
        (60.0, 4, 60.0),
    ],
)
def test_round_to(value: float, places: int, expected: float) -> None:
    assert round_to(value, places) == expected


def test_round_to_folds_negative_zero() -> None:
    assert math.copysign(1.0, round_to(-0.00001, 2)) == 1.0


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_round_to_marks_non_finite_as_undefined(value: float) -> None:
    assert round_to(value, 4) is None
    assert format_fixed(value, 4) == "undefined"
    assert format_number(value) == "undefined"


def test_reciprocal_of_zero_is_infinite() -> None:
    assert reciprocal(0.0) == math.inf
    assert reciprocal(4.0) == 0.25


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (10.0, "10"),
        (-5.0, "-5"),
        (0.1, "0.1"),
        (7, "7"),
        (None, "undefined"),
    ],
)
def test_format_number(value, expected: str) -> None:
    assert format_number(value) == expected


def test_as_number_keeps_fractions() -> None:
    assert as_number(12.0) == 12 and isinstance(as_number(12.0), int)
    assert as_number(0.25) == 0.25
