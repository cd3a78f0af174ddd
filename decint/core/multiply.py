"""Decimal Shift & Multiplication — products built from additions of shifted rows.

Invariants:
    - shift_left(n, d) == n * 10**d; zero and d == 0 return n unchanged
    - Result sign is the product of operand signs; zero is always POSITIVE
    - REPEATED_ADDITION and LONG produce identical results for every input
    - The running row is never shifted past the last digit of b

Design Decisions:
    - REPEATED_ADDITION is the default: O(sum of b's digits) additions, easy to
      audit against add()
    - LONG is a carry-propagating grade-school multiply, selectable for speed
"""

from decint.core.add_subtract import add
from decint.core.domain_types import MAX_DIGITS, MultiplyAlgorithm
from decint.core.errors import ErrorContext
from decint.core.smdi import (
    ZERO,
    DecimalInt,
    ensure_capacity,
    justify,
    to_display_string,
)


def shift_left(n: DecimalInt, d: int, *, max_digits: int = MAX_DIGITS) -> DecimalInt:
    """Multiply n by 10**d."""
    if d < 0:
        raise ValueError(f"shift distance must be >= 0, got {d}")
    if n.is_zero or d == 0:
        return n
    shifted = DecimalInt((0,) * d + n.digits, n.sign)
    return ensure_capacity(
        shifted,
        max_digits=max_digits,
        context=ErrorContext(
            operation="shift_left", operands=[to_display_string(n), str(d)],
        ),
    )


def multiply(
    a: DecimalInt,
    b: DecimalInt,
    *,
    max_digits: int = MAX_DIGITS,
    algorithm: MultiplyAlgorithm = MultiplyAlgorithm.REPEATED_ADDITION,
) -> DecimalInt:
    """Return a * b."""
    sign = a.sign.times(b.sign)
    if a.is_zero or b.is_zero:
        return ZERO

    if a.is_one:
        result = b.with_sign(sign)
    elif b.is_one:
        result = a.with_sign(sign)
    elif algorithm is MultiplyAlgorithm.LONG:
        result = justify(_long_multiply(a, b), sign)
    else:
        result = justify(_repeated_addition(a, b, max_digits), sign)

    return ensure_capacity(
        result,
        max_digits=max_digits,
        context=ErrorContext(
            operation="multiply",
            operands=[to_display_string(a), to_display_string(b)],
        ),
    )


def _repeated_addition(a: DecimalInt, b: DecimalInt, max_digits: int) -> tuple[int, ...]:
    """Add the shifted row b.digits[i] times per position of b."""
    accumulator = ZERO
    row = a.magnitude()
    for i, count in enumerate(b.digits):
        for _ in range(count):
            accumulator = add(accumulator, row, max_digits=max_digits)
        if i < b.high_index:
            row = shift_left(row, 1, max_digits=max_digits)
    return accumulator.digits


def _long_multiply(a: DecimalInt, b: DecimalInt) -> list[int]:
    """Carry-propagating product of magnitudes."""
    result = [0] * (len(a.digits) + len(b.digits))
    for i, x in enumerate(a.digits):
        carry = 0
        for j, y in enumerate(b.digits):
            total = result[i + j] + x * y + carry
            result[i + j] = total % 10
            carry = total // 10
        k = i + len(b.digits)
        while carry:
            total = result[k] + carry
            result[k] = total % 10
            carry = total // 10
            k += 1
    return result
