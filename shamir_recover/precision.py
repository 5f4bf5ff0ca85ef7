"""
Integer Precision
The representable range that decoding and interpolation are checked against.

Python integers never wrap, so a range only matters when the secret has to fit
a fixed-width slot somewhere else (a database column, a C struct, a wire
field). UNBOUNDED disables every overflow check.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class IntegerRange:
    """
    A two's-complement integer width.

    Args:
        bits: Total width in bits, or None for arbitrary precision.
        signed: Whether the range includes negative values.
    """
    bits: int | None = None
    signed: bool = True

    def __post_init__(self):
        if self.bits is not None and self.bits < 2:
            raise ValueError("Integer width must be at least 2 bits")

    @property
    def bounded(self) -> bool:
        return self.bits is not None

    @property
    def max(self) -> int | None:
        if self.bits is None:
            return None
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def min(self) -> int | None:
        if self.bits is None:
            return None
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    def contains(self, value: int) -> bool:
        """True if value fits this range."""
        if self.bits is None:
            return True
        return self.min <= value <= self.max

    def __str__(self) -> str:
        if self.bits is None:
            return "unbounded"
        return f"{'int' if self.signed else 'uint'}{self.bits}"


UNBOUNDED = IntegerRange()
INT64 = IntegerRange(bits=64)    # C long long
INT128 = IntegerRange(bits=128)
UINT64 = IntegerRange(bits=64, signed=False)
