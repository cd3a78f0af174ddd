"""Addition & Subtraction — tests for magnitude primitives and sign-pair dispatch.

Tests cover:
    - add_magnitudes carries into the extra high position
    - subtract_magnitudes borrows across zeros
    - All four sign pairs for add and subtract
    - Scenario values (123/45, -5/3, 0/7, 100/100)
    - Canonical zero from cancellation
    - Inputs are left untouched
    - CapacityExceededError when a carry overflows the capacity
"""

import itertools

import pytest

from decint.core.add_subtract import (
    add, subtract, add_magnitudes, subtract_magnitudes,
)
from decint.core.domain_types import Sign
from decint.core.errors import CapacityExceededError
from decint.core.smdi import from_int, to_display_string, ZERO


SAMPLE = [0, 1, -1, 7, -7, 45, -45, 99, -99, 100, -100, 123, -5, 3, 10 ** 18, -(10 ** 18) + 1]


# ─── Magnitude primitives ────────────────────────────────────────

def test_add_magnitudes_carries_into_extra_position():
    assert add_magnitudes(from_int(999), from_int(1)) == [0, 0, 0, 1]


def test_add_magnitudes_without_final_carry_leaves_high_zero():
    assert add_magnitudes(from_int(12), from_int(3)) == [5, 1, 0]


def test_add_magnitudes_ignores_signs():
    assert add_magnitudes(from_int(-12), from_int(-3)) == [5, 1, 0]


def test_subtract_magnitudes_borrows_across_zeros():
    assert subtract_magnitudes(from_int(1000), from_int(1)) == [9, 9, 9, 0]


def test_subtract_magnitudes_equal_is_all_zero():
    assert subtract_magnitudes(from_int(100), from_int(100)) == [0, 0, 0]


# ─── Scenarios ───────────────────────────────────────────────────

def test_scenario_123_45():
    a, b = from_int(123), from_int(45)
    assert to_display_string(add(a, b)) == "168"
    assert to_display_string(subtract(a, b)) == "78"


def test_scenario_minus5_3():
    a, b = from_int(-5), from_int(3)
    assert to_display_string(add(a, b)) == "-2"
    assert to_display_string(subtract(a, b)) == "-8"


def test_scenario_0_7():
    a, b = from_int(0), from_int(7)
    assert to_display_string(add(a, b)) == "7"
    assert to_display_string(subtract(a, b)) == "-7"


def test_scenario_100_100_is_canonical_zero():
    result = subtract(from_int(100), from_int(100))
    assert result.digits == (0,)
    assert result.high_index == 0
    assert result.sign is Sign.POSITIVE


# ─── Sign pairs ──────────────────────────────────────────────────

def test_add_all_sign_pairs():
    assert int(add(from_int(8), from_int(5))) == 13
    assert int(add(from_int(8), from_int(-5))) == 3
    assert int(add(from_int(-8), from_int(5))) == -3
    assert int(add(from_int(-8), from_int(-5))) == -13
    assert int(add(from_int(5), from_int(-8))) == -3
    assert int(add(from_int(-5), from_int(8))) == 3


def test_subtract_all_sign_pairs():
    assert int(subtract(from_int(8), from_int(5))) == 3
    assert int(subtract(from_int(5), from_int(8))) == -3
    assert int(subtract(from_int(8), from_int(-5))) == 13
    assert int(subtract(from_int(-8), from_int(5))) == -13
    assert int(subtract(from_int(-8), from_int(-5))) == -3
    assert int(subtract(from_int(-5), from_int(-8))) == 3


def test_add_and_subtract_match_int_arithmetic():
    for x, y in itertools.product(SAMPLE, repeat=2):
        a, b = from_int(x), from_int(y)
        assert int(add(a, b)) == x + y
        assert int(subtract(a, b)) == x - y


def test_add_is_commutative():
    for x, y in itertools.product(SAMPLE, repeat=2):
        a, b = from_int(x), from_int(y)
        assert add(a, b) == add(b, a)


def test_add_is_associative():
    for x, y, z in itertools.product([0, -7, 45, -100, 999], repeat=3):
        a, b, c = from_int(x), from_int(y), from_int(z)
        assert add(add(a, b), c) == add(a, add(b, c))


def test_subtract_undoes_add():
    for x, y in itertools.product(SAMPLE, repeat=2):
        a, b = from_int(x), from_int(y)
        assert subtract(add(a, b), b) == a


def test_adding_negation_gives_canonical_zero():
    for x in SAMPLE:
        a = from_int(x)
        result = add(a, a.negate())
        assert result == ZERO
        assert result.sign is Sign.POSITIVE


def test_inputs_are_not_mutated():
    a, b = from_int(-5), from_int(3)
    before = (a.digits, a.sign, b.digits, b.sign)
    add(a, b)
    subtract(a, b)
    subtract(b, a)
    assert (a.digits, a.sign, b.digits, b.sign) == before


# ─── Capacity ────────────────────────────────────────────────────

def test_add_carry_past_capacity_raises():
    a = from_int(999, max_digits=4)
    with pytest.raises(CapacityExceededError) as exc:
        add(a, from_int(1), max_digits=4)
    assert exc.value.context.operation == "add"
    assert exc.value.context.operands == ["999", "1"]


def test_add_within_capacity():
    assert int(add(from_int(500), from_int(499), max_digits=4)) == 999


def test_subtract_mixed_signs_past_capacity_raises():
    with pytest.raises(CapacityExceededError) as exc:
        subtract(from_int(-999), from_int(1), max_digits=4)
    assert exc.value.context.operation == "subtract"
