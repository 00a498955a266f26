#!/usr/bin/env python3
"""
Example: Host ledger using checked arithmetic

A toy in-memory ledger that pays a basis-point reward and processes
withdrawals. The ledger owns the stored balances; the checked functions only
compute new values, and any failure aborts the operation before anything is
persisted.
"""

import os
import sys
from typing import Dict

# Add the package to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from checked_ledger.balance import debit
from checked_ledger.errors import LedgerArithmeticError
from checked_ledger.logging_config import log_action, setup_logging
from checked_ledger.rates import apply_rate
from checked_ledger.uint import UIntWidth


def main():
    logger = setup_logging(level="DEBUG")
    balances: Dict[str, int] = {"alice": 9_999, "bob": 100}

    print("1. Reward of 50% on a balance below the scale")
    reward = apply_rate(balances["alice"], 5000)
    print(f"   alice earns {reward}")

    print("\n2. Withdrawals")
    for account, amount in (("alice", 4_000), ("bob", 200)):
        try:
            new_balance = debit(balances[account], amount)
        except LedgerArithmeticError as e:
            log_action(
                logger, "error", f"Withdrawal aborted: {e}",
                operation="withdraw", correlation_id=f"{account}-withdraw",
                extra={"code": e.code}
            )
            print(f"   {account}: rejected ({e.code}), balance stays {balances[account]}")
            continue
        balances[account] = new_balance
        print(f"   {account}: withdrew {amount}, balance now {new_balance}")

    print("\n3. Rate on the largest u64 amount")
    try:
        apply_rate(UIntWidth.U64.max_value, UIntWidth.U64.max_value)
    except LedgerArithmeticError as e:
        print(f"   rejected ({e.code}): {e}")


if __name__ == "__main__":
    main()
