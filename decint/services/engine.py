"""Arithmetic Engine — settings-bound facade over the pure core.

Invariants:
    - Every operation forwards the configured max_digits (and algorithm) to the core
    - divide checks the divisor before calling the core; a zero divisor never reaches it
    - Every DecIntError is logged with its error_code and re-raised, never swallowed
    - Holds only immutable Settings: one engine can serve any number of callers

Design Decisions:
    - Facade class, not module functions: callers configure capacity once
      and drivers depend on a single object
    - Core functions stay keyword-driven; this is the only place Settings meets arithmetic
"""

import logging
from typing import Callable, TypeVar

from decint.config import Settings, get_settings
from decint.core import add_subtract, compare as compare_ops, divide as divide_ops
from decint.core import multiply as multiply_ops, smdi
from decint.core.domain_types import Comparison
from decint.core.errors import DecIntError, DivisionByZeroError, ErrorContext
from decint.core.smdi import DecimalInt

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ArithmeticEngine:
    """Runs core operations with capacity and algorithms taken from Settings."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or get_settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def max_digits(self) -> int:
        return self._settings.max_digits

    # ─── Construction & display ──────────────────────────────────

    def from_int(self, m: int) -> DecimalInt:
        return self._run(
            "from_int", smdi.from_int, m,
            int_bits=self._settings.int_bits, max_digits=self.max_digits,
        )

    def to_display_string(self, n: DecimalInt) -> str:
        return smdi.to_display_string(n)

    # ─── Operations ──────────────────────────────────────────────

    def compare(self, a: DecimalInt, b: DecimalInt) -> Comparison:
        return compare_ops.compare(a, b)

    def add(self, a: DecimalInt, b: DecimalInt) -> DecimalInt:
        return self._run("add", add_subtract.add, a, b, max_digits=self.max_digits)

    def subtract(self, a: DecimalInt, b: DecimalInt) -> DecimalInt:
        return self._run(
            "subtract", add_subtract.subtract, a, b, max_digits=self.max_digits,
        )

    def multiply(self, a: DecimalInt, b: DecimalInt) -> DecimalInt:
        return self._run(
            "multiply", multiply_ops.multiply, a, b,
            max_digits=self.max_digits,
            algorithm=self._settings.multiply_algorithm,
        )

    def divide(self, a: DecimalInt, b: DecimalInt) -> DecimalInt:
        if b.is_zero:
            error = DivisionByZeroError(ErrorContext(
                operation="divide",
                operands=[smdi.to_display_string(a), smdi.to_display_string(b)],
                max_digits=self.max_digits,
            ))
            self._log_error("divide", error)
            raise error
        return self._run(
            "divide", divide_ops.divide, a, b,
            max_digits=self.max_digits,
            algorithm=self._settings.divide_algorithm,
        )

    # ─── Internals ───────────────────────────────────────────────

    def _run(self, operation: str, fn: Callable[..., T], *args, **kwargs) -> T:
        logger.debug(
            "Running %s", operation,
            extra={"operation": operation, "max_digits": self.max_digits},
        )
        try:
            return fn(*args, **kwargs)
        except DecIntError as e:
            self._log_error(operation, e)
            raise

    def _log_error(self, operation: str, error: DecIntError) -> None:
        logger.warning(
            "Arithmetic error in %s: %s", operation, error.message,
            extra={"operation": operation, "error_code": error.code},
        )
