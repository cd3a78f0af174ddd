"""Domain Types — enums and constants shared by every arithmetic module.

Invariants:
    - Sign and Comparison are int-valued: they multiply and negate like the numbers they stand for
    - Zero is never NEGATIVE (enforced by smdi.justify, not here)
    - MAX_DIGITS is the default capacity; one digit of it is reserved as carry headroom

Design Decisions:
    - IntEnum over str Enum: sign arithmetic (a.sign * b.sign) stays readable
    - Algorithm enums are str Enums: settings load them from env vars by value
"""

from enum import Enum, IntEnum


# ─── Capacity ────────────────────────────────────────────────────

MAX_DIGITS: int = 128           # digit slots; usable magnitude is MAX_DIGITS - 1 digits
DEFAULT_INT_BITS: int = 64      # width of the machine integer accepted by from_int


# ─── Enums ───────────────────────────────────────────────────────

class Sign(IntEnum):
    """Sign of a DecimalInt. Zero is always POSITIVE."""
    POSITIVE = 1
    NEGATIVE = -1

    def flipped(self) -> "Sign":
        return Sign.NEGATIVE if self is Sign.POSITIVE else Sign.POSITIVE

    def times(self, other: "Sign") -> "Sign":
        return Sign(self.value * other.value)


class Comparison(IntEnum):
    """Outcome of compare(a, b): the sign of a - b."""
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

    def flipped(self) -> "Comparison":
        return Comparison(-self.value)


class MultiplyAlgorithm(str, Enum):
    """Interchangeable multiplication strategies (identical results)."""
    REPEATED_ADDITION = "repeated_addition"
    LONG = "long"


class DivideAlgorithm(str, Enum):
    """Interchangeable division strategies (identical truncated quotients)."""
    REPEATED_SUBTRACTION = "repeated_subtraction"
    DIGIT_ESTIMATION = "digit_estimation"
