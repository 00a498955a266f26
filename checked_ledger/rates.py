"""
Rate Application Module

Computes amount * rate / scale for fees, rewards and interest expressed in
parts-per-scale (basis points by default).

Order of operations matters. Dividing first, as in (amount / scale) * rate,
throws away the remainder of amount before it is scaled: 9999 at 5000 bps
comes out as 0 instead of 4999. The product is therefore formed in full,
in a widened u128 intermediate, and the final division is the only place
where truncation happens. The quotient is narrowed back to u64 explicitly.
"""

from typing import Final

from .errors import ArithmeticOverflow
from .logging_config import get_logger, log_action
from .uint import Amount, RateBasisPoints, UIntWidth

logger = get_logger("checked_ledger.rates")

# 10,000 bps = 100%
BASIS_POINTS_SCALE: Final[int] = 10_000


def _fail(message: str, stage: str, amount: int, rate: int, scale: int) -> ArithmeticOverflow:
    operands = {"amount": amount, "rate": rate, "scale": scale}
    log_action(
        logger, "warning", f"Rate application failed: {message}",
        operation="apply_rate",
        extra={"stage": stage, **operands}
    )
    return ArithmeticOverflow(message, stage, operands)


def apply_rate(amount: Amount, rate: RateBasisPoints,
               scale: int = BASIS_POINTS_SCALE) -> Amount:
    """
    Apply a rate to an amount: floor(amount * rate / scale)

    Args:
        amount: Base amount (u64)
        rate: Rate in parts-per-scale (u64)
        scale: Parts making up 100% (u64, must be positive)

    Returns:
        The floored result as a u64 value

    Raises:
        ArithmeticOverflow: If the widened product does not fit u128, if
            scale is zero, or if the result does not fit u64
        InvalidOperand: If an operand is outside the u64 range
        TypeError: If an operand is not an int

    Examples:
        >>> apply_rate(9999, 5000)
        4999
        >>> apply_rate(1_000_000, 250)
        25000
    """
    UIntWidth.U64.require(amount, "amount")
    UIntWidth.U64.require(rate, "rate")
    UIntWidth.U64.require(scale, "scale")

    # Multiply first, at double width
    numerator = UIntWidth.U128.checked_mul(amount, rate)
    if numerator is None:
        raise _fail("product exceeds u128", "multiply", amount, rate, scale)

    # Divide last; the only truncation in the pipeline
    quotient = UIntWidth.U128.checked_div(numerator, scale)
    if quotient is None:
        raise _fail("scale must be positive", "divide", amount, rate, scale)

    result = UIntWidth.U64.narrow(quotient)
    if result is None:
        raise _fail(f"result {quotient} exceeds u64", "narrow", amount, rate, scale)

    logger.debug(f"Rate applied: ({amount} * {rate}) / {scale} = {result}")
    return result
