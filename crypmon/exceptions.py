"""Exceptions raised by the crypmon algorithms.
"""

class CrypmonError(Exception):
    """Base class for all crypmon errors."""

class RuleCountMismatch(CrypmonError, ValueError):
    """The supplied rule does not match the number of agents."""

class IndexOutOfRange(CrypmonError, IndexError):
    """A token refers to an agent index missing from the ciphertext collection."""
