"""Arithmetic Properties — seeded random operands checked against int arithmetic.

Tests cover:
    - add / subtract / multiply / divide agree with Python ints (division truncated)
    - compare agrees with the sign of subtract
    - Both multiply and both divide algorithms agree on every sample
    - Normalization is idempotent on every result
"""

import random

import pytest

from decint.core.add_subtract import add, subtract
from decint.core.compare import compare
from decint.core.divide import divide
from decint.core.domain_types import DivideAlgorithm, MultiplyAlgorithm
from decint.core.multiply import multiply
from decint.core.smdi import from_int, justify


def _random_operands(seed: int, count: int, max_len: int) -> list[tuple[int, int]]:
    rng = random.Random(seed)
    pairs = []
    for _ in range(count):
        x = rng.choice([-1, 1]) * rng.randrange(10 ** rng.randint(1, max_len))
        y = rng.choice([-1, 1]) * rng.randrange(10 ** rng.randint(1, max_len))
        pairs.append((x, y))
    return pairs


PAIRS = _random_operands(seed=20240607, count=40, max_len=30)


def _truncating_div(x: int, y: int) -> int:
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


@pytest.mark.parametrize("x,y", PAIRS)
def test_operations_match_int_arithmetic(x, y):
    a, b = from_int(x, int_bits=None), from_int(y, int_bits=None)
    assert int(add(a, b)) == x + y
    assert int(subtract(a, b)) == x - y
    assert int(multiply(a, b)) == x * y
    if y != 0:
        assert int(divide(a, b)) == _truncating_div(x, y)


@pytest.mark.parametrize("x,y", PAIRS)
def test_compare_matches_sign_of_difference(x, y):
    a, b = from_int(x, int_bits=None), from_int(y, int_bits=None)
    difference = subtract(a, b)
    expected = 0 if difference.is_zero else int(difference.sign)
    assert int(compare(a, b)) == expected


@pytest.mark.parametrize("x,y", PAIRS)
def test_algorithms_agree(x, y):
    a, b = from_int(x, int_bits=None), from_int(y, int_bits=None)
    assert multiply(a, b) == multiply(a, b, algorithm=MultiplyAlgorithm.LONG)
    if y != 0:
        assert divide(a, b) == divide(a, b, algorithm=DivideAlgorithm.DIGIT_ESTIMATION)


@pytest.mark.parametrize("x,y", PAIRS)
def test_results_are_already_normalized(x, y):
    a, b = from_int(x, int_bits=None), from_int(y, int_bits=None)
    for result in (add(a, b), subtract(a, b), multiply(a, b)):
        assert justify(result.digits, result.sign) == result
