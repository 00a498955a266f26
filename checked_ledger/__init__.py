"""
Checked Ledger Arithmetic

Fixed-width unsigned integer arithmetic for balance and rate computations.
Every operation either returns the exact result or raises; nothing wraps,
saturates or truncates silently.
"""

__version__ = "1.0.0"
