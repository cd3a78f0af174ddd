"""Truncating Division — quotient only, rounded toward zero.

Invariants:
    - divide(a, b) matches C integer division: divide(-7, 2) == -3
    - A zero divisor raises DivisionByZeroError; nothing is computed
    - |a| < |b| short-circuits to zero (magnitudes, not signed values)
    - Operands are never mutated; long division runs on local magnitudes
    - REPEATED_SUBTRACTION and DIGIT_ESTIMATION produce identical quotients

Design Decisions:
    - No remainder is produced or exposed
    - DIGIT_ESTIMATION searches the nine precomputed multiples of |b| instead of
      subtracting up to nine times
"""

from decint.core.add_subtract import add, subtract
from decint.core.compare import compare_magnitude
from decint.core.domain_types import MAX_DIGITS, Comparison, DivideAlgorithm
from decint.core.errors import DivisionByZeroError, ErrorContext
from decint.core.multiply import shift_left
from decint.core.smdi import (
    ZERO,
    DecimalInt,
    ensure_capacity,
    justify,
    to_display_string,
)


def divide(
    a: DecimalInt,
    b: DecimalInt,
    *,
    max_digits: int = MAX_DIGITS,
    algorithm: DivideAlgorithm = DivideAlgorithm.REPEATED_SUBTRACTION,
) -> DecimalInt:
    """Return a / b truncated toward zero."""
    context = ErrorContext(
        operation="divide",
        operands=[to_display_string(a), to_display_string(b)],
        max_digits=max_digits,
    )
    if b.is_zero:
        raise DivisionByZeroError(context)
    if a.is_zero or compare_magnitude(a, b) is Comparison.NEGATIVE:
        return ZERO

    sign = a.sign.times(b.sign)
    if b.is_one:
        return ensure_capacity(a.with_sign(sign), max_digits=max_digits, context=context)

    dividend = a.magnitude()
    divisor = b.magnitude()
    if algorithm is DivideAlgorithm.DIGIT_ESTIMATION:
        digits = _digit_estimation(dividend, divisor, max_digits)
    else:
        digits = _repeated_subtraction(dividend, divisor, max_digits)

    return ensure_capacity(justify(digits, sign), max_digits=max_digits, context=context)


def _bring_down(row: DecimalInt, digit: int, max_digits: int) -> DecimalInt:
    """row * 10 + digit."""
    if row.is_zero:
        return justify((digit,))
    shifted = shift_left(row, 1, max_digits=max_digits)
    return DecimalInt((digit,) + shifted.digits[1:])


def _repeated_subtraction(
    dividend: DecimalInt, divisor: DecimalInt, max_digits: int,
) -> list[int]:
    quotient = [0] * len(dividend.digits)
    row = ZERO
    for i in range(dividend.high_index, -1, -1):
        row = _bring_down(row, dividend.digits[i], max_digits)
        while compare_magnitude(row, divisor) is not Comparison.NEGATIVE:
            quotient[i] += 1
            row = subtract(row, divisor, max_digits=max_digits)
    return quotient


def _digit_estimation(
    dividend: DecimalInt, divisor: DecimalInt, max_digits: int,
) -> list[int]:
    # multiples[k] == divisor * k; 9 * divisor may need one digit more than the dividend
    multiples = [ZERO]
    for _ in range(9):
        multiples.append(add(multiples[-1], divisor, max_digits=max_digits + 1))

    quotient = [0] * len(dividend.digits)
    row = ZERO
    for i in range(dividend.high_index, -1, -1):
        row = _bring_down(row, dividend.digits[i], max_digits)
        lo, hi = 0, 9
        while lo < hi:
            mid = (lo + hi + 1) // 2
            if compare_magnitude(multiples[mid], row) is Comparison.POSITIVE:
                hi = mid - 1
            else:
                lo = mid
        quotient[i] = lo
        if lo:
            row = subtract(row, multiples[lo], max_digits=max_digits)
    return quotient
