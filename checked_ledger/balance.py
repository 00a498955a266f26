"""
Balance Debit Module

Checked subtraction for debiting an account balance. An unsigned
subtraction that borrows would wrap to balance - amount + 2**64 and
fabricate value; the borrow is detected and rejected instead.
"""

from .errors import InsufficientFunds
from .logging_config import get_logger, log_action
from .uint import Amount, Balance, UIntWidth

logger = get_logger("checked_ledger.balance")


def debit(balance: Balance, amount: Amount) -> Balance:
    """
    Debit amount from balance

    The function is pure: the caller's stored balance is untouched until it
    persists the returned value.

    Args:
        balance: Current holdings (u64)
        amount: Requested debit (u64)

    Returns:
        balance - amount, never greater than balance

    Raises:
        InsufficientFunds: If amount exceeds balance
        InvalidOperand: If an operand is outside the u64 range
        TypeError: If an operand is not an int
    """
    UIntWidth.U64.require(balance, "balance")
    UIntWidth.U64.require(amount, "amount")

    new_balance = UIntWidth.U64.checked_sub(balance, amount)
    if new_balance is None:
        log_action(
            logger, "warning", "Debit rejected: insufficient funds",
            operation="debit",
            extra={"balance": balance, "amount": amount}
        )
        raise InsufficientFunds(balance, amount)

    logger.debug(f"Debit computed: {balance} - {amount} = {new_balance}")
    return new_balance
