"""decint Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a working default: the engine runs with no environment at all
    - get_settings() is cached (lru_cache) — single instance per process
    - Env vars are prefixed DECINT_ (e.g. DECINT_MAX_DIGITS=64)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, enum coercion, .env file support
    - The core never reads Settings; services/engine.py passes values down explicitly
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from decint.core.domain_types import (
    DEFAULT_INT_BITS,
    MAX_DIGITS,
    DivideAlgorithm,
    MultiplyAlgorithm,
)


class Settings(BaseSettings):
    """Engine settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DECINT_", env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Capacity
    max_digits: int = MAX_DIGITS
    int_bits: int | None = DEFAULT_INT_BITS

    @field_validator("max_digits")
    @classmethod
    def check_max_digits(cls, v: int) -> int:
        """One slot is carry headroom, so at least two are needed."""
        if v < 2:
            raise ValueError("max_digits must be >= 2")
        return v

    @field_validator("int_bits")
    @classmethod
    def check_int_bits(cls, v: int | None) -> int | None:
        if v is not None and v < 2:
            raise ValueError("int_bits must be >= 2")
        return v

    # Algorithms
    multiply_algorithm: MultiplyAlgorithm = MultiplyAlgorithm.REPEATED_ADDITION
    divide_algorithm: DivideAlgorithm = DivideAlgorithm.REPEATED_SUBTRACTION

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
