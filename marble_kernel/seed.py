"""
Marble Kernel — Seed Conversion

One explicit conversion from the accepted source forms (int, or a
base-10 digit string) to a bounded non-negative integer.
"""

from __future__ import annotations

import re
from typing import Union

from .constants import SEED_BITS, SEED_MAX

# ASCII digits only. int() alone would also accept signs, whitespace,
# underscores and non-ASCII digits.
_DECIMAL_PATTERN = re.compile(r"[0-9]+")
_MAX_DIGITS = len(str(SEED_MAX))

SeedLike = Union[int, str]


class SeedFormatError(ValueError):
    """Raised when a seed is not a valid non-negative base-10 integer."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid seed {value!r}: {reason}")


def parse_seed(value: SeedLike) -> int:
    """
    Convert a seed source to an int in [0, 2**256 - 1].

    Raises SeedFormatError for anything else.
    """
    if isinstance(value, bool):
        raise SeedFormatError(value, "booleans are not seeds")

    if isinstance(value, int):
        seed = value
    elif isinstance(value, str):
        if not _DECIMAL_PATTERN.fullmatch(value):
            raise SeedFormatError(value, "expected base-10 digits only")
        if len(value.lstrip("0")) > _MAX_DIGITS:
            raise SeedFormatError(value, f"exceeds {SEED_BITS} bits")
        seed = int(value, 10)
    else:
        raise SeedFormatError(value, f"unsupported type {type(value).__name__}")

    if seed < 0:
        raise SeedFormatError(value, "must be non-negative")
    if seed > SEED_MAX:
        raise SeedFormatError(value, f"exceeds {SEED_BITS} bits")
    return seed
