"""
Fixed-Width Unsigned Integer Module

Models the unsigned widths used for ledger values and provides checked
primitives over them. Python integers never overflow on their own, so every
width boundary is enforced explicitly here. NEVER narrows implicitly.
"""

from enum import Enum
from typing import Optional

from .errors import InvalidOperand

# Ledger value types. All of them are u64 at the host boundary.
Balance = int
Amount = int
RateBasisPoints = int


class UIntWidth(Enum):
    """Unsigned integer widths with their bit counts"""
    U64 = ("u64", 64)     # Balances, amounts and rates
    U128 = ("u128", 128)  # Widened intermediates for u64 * u64

    def __init__(self, label: str, bits: int):
        self.label = label
        self.bits = bits

    @property
    def max_value(self) -> int:
        """Largest value representable at this width"""
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Check if value fits this width without wraparound"""
        return 0 <= value <= self.max_value

    def require(self, value: int, name: str) -> int:
        """
        Validate an operand against this width

        Args:
            value: Operand to validate
            name: Operand name used in error messages

        Returns:
            The operand unchanged

        Raises:
            TypeError: If value is not an int (bool is rejected too)
            InvalidOperand: If value is negative or exceeds max_value
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if not self.contains(value):
            raise InvalidOperand(name, value, self.label)
        return value

    def checked_sub(self, minuend: int, subtrahend: int) -> Optional[int]:
        """Subtract, returning None on borrow out"""
        if subtrahend > minuend:
            return None
        return minuend - subtrahend

    def checked_mul(self, a: int, b: int) -> Optional[int]:
        """Multiply, returning None if the product exceeds this width"""
        product = a * b
        if product > self.max_value:
            return None
        return product

    def checked_div(self, dividend: int, divisor: int) -> Optional[int]:
        """Floor division, returning None for a zero divisor"""
        if divisor == 0:
            return None
        return dividend // divisor

    def narrow(self, value: int) -> Optional[int]:
        """
        Convert a value from a wider width into this one.

        Returns None instead of truncating when the value does not fit.
        """
        if not self.contains(value):
            return None
        return value
