"""decint — signed-magnitude decimal integer arithmetic with a bounded digit capacity.

Invariants:
    - Package root has no side effects beyond importing the public surface
    - Re-exports are explicit; nothing is star-imported
"""

from decint.config import Settings, get_settings
from decint.core.add_subtract import add, subtract
from decint.core.compare import compare, compare_magnitude
from decint.core.divide import divide
from decint.core.domain_types import (
    MAX_DIGITS,
    Comparison,
    DivideAlgorithm,
    MultiplyAlgorithm,
    Sign,
)
from decint.core.errors import (
    CapacityExceededError,
    DecIntError,
    DivisionByZeroError,
    IntegerConversionOverflowError,
)
from decint.core.multiply import multiply, shift_left
from decint.core.smdi import DecimalInt, from_int, justify, to_display_string
from decint.infrastructure.observability import setup_logging
from decint.services.engine import ArithmeticEngine

__all__ = [
    "ArithmeticEngine",
    "CapacityExceededError",
    "Comparison",
    "DecIntError",
    "DecimalInt",
    "DivideAlgorithm",
    "DivisionByZeroError",
    "IntegerConversionOverflowError",
    "MAX_DIGITS",
    "MultiplyAlgorithm",
    "Settings",
    "Sign",
    "add",
    "compare",
    "compare_magnitude",
    "divide",
    "from_int",
    "get_settings",
    "justify",
    "multiply",
    "setup_logging",
    "shift_left",
    "subtract",
    "to_display_string",
]
