"""Signed-Magnitude Decimal Integer — the value type every operation consumes and returns.

Invariants:
    - digits are base-10, least-significant-first, each in [0, 9]
    - Only significant digits are stored: len(digits) == high_index + 1
    - digits[high_index] != 0 unless the value is zero
    - Canonical zero is digits == (0,), sign == POSITIVE
    - Values are immutable (frozen dataclass); operations return new values

Design Decisions:
    - Tuple of significant digits instead of a fixed 128-slot buffer: nothing past
      high_index exists to be read, and capacity is checked explicitly per operation
    - Capacity is a keyword argument, not part of the value: the core never reads settings
    - from_int derives the magnitude without a signed abs, so the most negative
      machine integer converts like any other value
"""

from dataclasses import dataclass
from typing import Sequence

from decint.core.domain_types import DEFAULT_INT_BITS, MAX_DIGITS, Sign
from decint.core.errors import (
    CapacityExceededError,
    ErrorContext,
    IntegerConversionOverflowError,
)


@dataclass(frozen=True)
class DecimalInt:
    """Immutable signed-magnitude decimal integer."""

    digits: tuple[int, ...]
    sign: Sign = Sign.POSITIVE

    def __post_init__(self):
        if not self.digits:
            raise ValueError("DecimalInt needs at least one digit")
        if any(d < 0 or d > 9 for d in self.digits):
            raise ValueError(f"digits must be in [0, 9]: {self.digits}")
        if len(self.digits) > 1 and self.digits[-1] == 0:
            raise ValueError("high-order zero digit; build through justify()")
        if self.is_zero and self.sign is not Sign.POSITIVE:
            raise ValueError("zero must be POSITIVE")

    @property
    def high_index(self) -> int:
        return len(self.digits) - 1

    @property
    def is_zero(self) -> bool:
        return self.digits == (0,)

    @property
    def is_one(self) -> bool:
        """True when the magnitude is one (either sign)."""
        return self.digits == (1,)

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    def negate(self) -> "DecimalInt":
        if self.is_zero:
            return self
        return DecimalInt(self.digits, self.sign.flipped())

    def magnitude(self) -> "DecimalInt":
        return self.with_sign(Sign.POSITIVE)

    def with_sign(self, sign: Sign) -> "DecimalInt":
        """Same digits, given sign. Zero stays POSITIVE."""
        if self.is_zero or sign is self.sign:
            return self
        return DecimalInt(self.digits, sign)

    def __neg__(self) -> "DecimalInt":
        return self.negate()

    def __abs__(self) -> "DecimalInt":
        return self.magnitude()

    def __int__(self) -> int:
        value = 0
        for d in reversed(self.digits):
            value = value * 10 + d
        return -value if self.is_negative else value

    def __str__(self) -> str:
        return to_display_string(self)


ZERO = DecimalInt((0,))
ONE = DecimalInt((1,))


def justify(digits: Sequence[int], sign: Sign = Sign.POSITIVE) -> DecimalInt:
    """Strip high-order zero digits and canonicalize the sign of zero."""
    high = len(digits) - 1
    while high > 0 and digits[high] == 0:
        high -= 1
    if high < 0:
        return ZERO
    trimmed = tuple(digits[:high + 1])
    if trimmed == (0,):
        return ZERO
    return DecimalInt(trimmed, sign)


def ensure_capacity(
    n: DecimalInt,
    *,
    max_digits: int = MAX_DIGITS,
    context: ErrorContext | None = None,
) -> DecimalInt:
    """Return n unchanged, or raise CapacityExceededError if high_index >= max_digits - 1."""
    if n.high_index >= max_digits - 1:
        raise CapacityExceededError(len(n.digits), max_digits, context)
    return n


def from_int(
    m: int,
    *,
    int_bits: int | None = DEFAULT_INT_BITS,
    max_digits: int = MAX_DIGITS,
) -> DecimalInt:
    """Convert a machine integer to a DecimalInt.

    When int_bits is set, m must fit a signed integer of that width; the most
    negative value of the range is accepted. Raises IntegerConversionOverflowError
    outside the range and CapacityExceededError when the digits do not fit.
    """
    if isinstance(m, bool) or not isinstance(m, int):
        raise TypeError(f"from_int expects an int, got {type(m).__name__}")
    if int_bits is not None:
        lowest = -(1 << (int_bits - 1))
        highest = (1 << (int_bits - 1)) - 1
        if m < lowest or m > highest:
            raise IntegerConversionOverflowError(
                m, int_bits, ErrorContext(operation="from_int"),
            )

    sign = Sign.POSITIVE if m >= 0 else Sign.NEGATIVE
    # -(m + 1) stays inside the signed range even for the minimum value
    magnitude = m if m >= 0 else -(m + 1) + 1

    digits: list[int] = []
    while magnitude > 0:
        digits.append(magnitude % 10)
        magnitude //= 10
    if not digits:
        return ZERO

    return ensure_capacity(
        DecimalInt(tuple(digits), sign),
        max_digits=max_digits,
        context=ErrorContext(operation="from_int"),
    )


def to_display_string(n: DecimalInt) -> str:
    """Render as an optional '-' followed by digits from high_index down to 0."""
    body = "".join(str(d) for d in reversed(n.digits))
    return f"-{body}" if n.is_negative else body
