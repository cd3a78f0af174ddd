"""Addition & Subtraction — sign-pair dispatch over two magnitude primitives.

Invariants:
    - Inputs are never mutated; subtract flips b's sign in a local variable only
    - Every sign pair maps to exactly one primitive (sum or difference) in _SIGN_DISPATCH
    - add_magnitudes runs one position past the longer operand to absorb the final carry
    - subtract_magnitudes requires |a| >= |b|; _difference swaps and negates otherwise
    - Results are justified, then capacity-checked

Design Decisions:
    - Explicit dict over mutual recursion between add and subtract: all four
      sign cases visible in one place
    - subtract(a, b) is add(a, -b) with the negation applied to the dispatch key
"""

from typing import Callable

from decint.core.compare import compare_magnitude
from decint.core.domain_types import MAX_DIGITS, Comparison, Sign
from decint.core.errors import ErrorContext
from decint.core.smdi import DecimalInt, ensure_capacity, justify, to_display_string


# ─── Magnitude primitives ────────────────────────────────────────

def add_magnitudes(a: DecimalInt, b: DecimalInt) -> list[int]:
    """Digit-wise |a| + |b| with carry. Result may carry a high-order zero."""
    length = max(a.high_index, b.high_index) + 1
    result: list[int] = []
    carry = 0
    for i in range(length + 1):
        total = carry + _digit(a, i) + _digit(b, i)
        result.append(total % 10)
        carry = total // 10
    return result


def subtract_magnitudes(a: DecimalInt, b: DecimalInt) -> list[int]:
    """Digit-wise |a| - |b| with borrow. Caller guarantees |a| >= |b|."""
    length = max(a.high_index, b.high_index)
    result: list[int] = []
    borrow = 0
    for i in range(length + 1):
        diff = _digit(a, i) - _digit(b, i) - borrow
        borrow = 0
        if diff < 0:
            diff += 10
            borrow = 1
        result.append(diff)
    return result


def _digit(n: DecimalInt, i: int) -> int:
    return n.digits[i] if i <= n.high_index else 0


# ─── Sign-pair handlers ──────────────────────────────────────────

def _sum_positive(a: DecimalInt, b: DecimalInt) -> DecimalInt:
    return justify(add_magnitudes(a, b), Sign.POSITIVE)


def _sum_negative(a: DecimalInt, b: DecimalInt) -> DecimalInt:
    return justify(add_magnitudes(a, b), Sign.NEGATIVE)


def _difference(a: DecimalInt, b: DecimalInt) -> DecimalInt:
    """|a| - |b| as a signed result."""
    if compare_magnitude(a, b) is Comparison.NEGATIVE:
        return justify(subtract_magnitudes(b, a), Sign.NEGATIVE)
    return justify(subtract_magnitudes(a, b), Sign.POSITIVE)


def _reverse_difference(a: DecimalInt, b: DecimalInt) -> DecimalInt:
    """|b| - |a| as a signed result."""
    return _difference(b, a)


# Keyed by (sign of a, effective sign of b): a + b
_SIGN_DISPATCH: dict[tuple[Sign, Sign], Callable[[DecimalInt, DecimalInt], DecimalInt]] = {
    (Sign.POSITIVE, Sign.POSITIVE): _sum_positive,
    (Sign.POSITIVE, Sign.NEGATIVE): _difference,
    (Sign.NEGATIVE, Sign.POSITIVE): _reverse_difference,
    (Sign.NEGATIVE, Sign.NEGATIVE): _sum_negative,
}


def _signed_sum(
    a: DecimalInt, b: DecimalInt, b_sign: Sign, operation: str, max_digits: int,
) -> DecimalInt:
    result = _SIGN_DISPATCH[(a.sign, b_sign)](a, b)
    return ensure_capacity(
        result,
        max_digits=max_digits,
        context=ErrorContext(
            operation=operation,
            operands=[to_display_string(a), to_display_string(b)],
        ),
    )


# ─── Public operations ───────────────────────────────────────────

def add(a: DecimalInt, b: DecimalInt, *, max_digits: int = MAX_DIGITS) -> DecimalInt:
    """Return a + b."""
    return _signed_sum(a, b, b.sign, "add", max_digits)


def subtract(a: DecimalInt, b: DecimalInt, *, max_digits: int = MAX_DIGITS) -> DecimalInt:
    """Return a - b."""
    return _signed_sum(a, b, b.sign.flipped(), "subtract", max_digits)
