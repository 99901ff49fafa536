"""Exception types for BSTreeLib.

Every error raised on purpose by the library derives from BSTreeError,
so callers can branch on the specific kind or catch the whole family.
"""

from typing import Any


class BSTreeError(Exception):
    """Base class for errors raised by BSTreeLib."""
    pass


class EmptyTreeError(BSTreeError):
    """Raised when an operation needs a non-empty tree."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Non-empty tree expected on {operation}().")


class KeyNotFoundError(BSTreeError, KeyError):
    """Raised by retrieve() when no stored value compares equal to the key."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Existent key expected on retrieve(): {self.key!r}"


class ConfigurationError(BSTreeError, ValueError):
    """Raised when a TreeConfig fails validation."""
    pass
