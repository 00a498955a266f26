"""
Ledger Arithmetic Errors

Failure kinds raised by the checked balance and rate operations. Both
arithmetic failures are terminal: the enclosing operation must abort.
"""

from typing import Dict, Optional


class LedgerArithmeticError(ArithmeticError):
    """Base class for checked ledger arithmetic failures"""

    code = "LedgerArithmeticError"


class InsufficientFunds(LedgerArithmeticError):
    """Debit amount exceeds the available balance"""

    code = "InsufficientFunds"

    def __init__(self, balance: int, amount: int):
        self.balance = balance
        self.amount = amount
        super().__init__(
            f"Insufficient funds for withdrawal: balance {balance}, requested {amount}"
        )


class ArithmeticOverflow(LedgerArithmeticError):
    """
    Result cannot be represented at the required width.

    `stage` names the step that failed (multiply, divide or narrow) and
    `operands` holds the inputs of the failed call.
    """

    code = "ArithmeticOverflow"

    def __init__(self, message: str, stage: str, operands: Optional[Dict[str, int]] = None):
        self.stage = stage
        self.operands = dict(operands or {})
        super().__init__(message)


class InvalidOperand(ValueError):
    """Operand lies outside the unsigned range of its declared width"""

    def __init__(self, name: str, value: int, width: str):
        self.name = name
        self.value = value
        self.width = width
        super().__init__(f"{name} must be a {width} value, got {value}")
