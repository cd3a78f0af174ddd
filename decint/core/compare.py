"""Comparison — sign of (a - b) without computing the difference.

Invariants:
    - compare is antisymmetric: compare(a, b) == compare(b, a).flipped()
    - compare_magnitude ignores signs entirely
    - Relies on canonical form: a longer digit tuple is always a larger magnitude
"""

from decint.core.domain_types import Comparison, Sign
from decint.core.smdi import DecimalInt


def compare_magnitude(a: DecimalInt, b: DecimalInt) -> Comparison:
    """Compare |a| with |b|."""
    if a.high_index > b.high_index:
        return Comparison.POSITIVE
    if a.high_index < b.high_index:
        return Comparison.NEGATIVE

    for i in range(a.high_index, -1, -1):
        if a.digits[i] > b.digits[i]:
            return Comparison.POSITIVE
        if a.digits[i] < b.digits[i]:
            return Comparison.NEGATIVE

    return Comparison.ZERO


def compare(a: DecimalInt, b: DecimalInt) -> Comparison:
    """Return the sign of a - b."""
    if a.sign is not b.sign:
        return Comparison(a.sign.value)

    outcome = compare_magnitude(a, b)
    return outcome.flipped() if a.sign is Sign.NEGATIVE else outcome
