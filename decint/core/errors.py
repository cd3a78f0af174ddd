"""Error Hierarchy — typed, categorized exceptions for every decint failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Arithmetic errors are deterministic: retrying the same call fails the same way
    - to_dict() produces a structured envelope safe to log or hand to a caller

Design Decisions:
    - Single hierarchy with DecIntError base: a caller catches one type for all arithmetic failures
    - ErrorContext as dataclass: operands travel as display strings, no coupling to logging
    - Programming errors (wrong argument type, negative shift) stay TypeError/ValueError
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CAPACITY = "capacity"
    DOMAIN = "domain"
    CONVERSION = "conversion"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    operands: list[str] | None = None
    max_digits: int | None = None


class DecIntError(Exception):
    """Base exception for all decint arithmetic errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a structured error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "operands": self.context.operands,
                    "max_digits": self.context.max_digits,
                },
            }
        }


# ─── Arithmetic Errors ──────────────────────────────────────────

class CapacityExceededError(DecIntError):
    """Result needs more digits than the configured capacity allows."""
    def __init__(
        self, required_digits: int, max_digits: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.max_digits = max_digits
        super().__init__(
            f"Result needs {required_digits} digits; capacity {max_digits} "
            f"allows at most {max_digits - 1}.",
            "CAPACITY_EXCEEDED", ErrorCategory.CAPACITY,
            ErrorSeverity.ERROR, ctx,
        )
        self.required_digits = required_digits
        self.max_digits = max_digits


class DivisionByZeroError(DecIntError):
    """Divisor magnitude is zero."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Division by zero has no representable result.",
            "DIVISION_BY_ZERO", ErrorCategory.DOMAIN,
            ErrorSeverity.ERROR, context,
        )


class IntegerConversionOverflowError(DecIntError):
    """Input does not fit the signed machine-integer range."""
    def __init__(self, value: int, int_bits: int, context: ErrorContext | None = None):
        super().__init__(
            f"{value} is outside the signed {int_bits}-bit integer range.",
            "INTEGER_CONVERSION_OVERFLOW", ErrorCategory.CONVERSION,
            ErrorSeverity.ERROR, context,
        )
        self.value = value
        self.int_bits = int_bits
