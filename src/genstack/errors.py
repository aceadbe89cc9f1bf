"""Exceptions raised by genstack.

Every error derives from StackError and also from the builtin exception a
caller would expect for the same mistake, so ``except IndexError`` keeps
working for code written against plain lists.
"""

from __future__ import annotations


class StackError(Exception):
    """Base class for all errors raised by genstack."""


class EmptyStackError(StackError, IndexError):
    """Raised when an operation needs a top element but the stack is empty."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} from empty stack")


class InsufficientElementsError(StackError, IndexError):
    """Raised by pop_exact when fewer elements are present than requested."""

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"cannot pop {requested} elements, stack holds {available}"
        )


class CapacityError(StackError, ValueError):
    """Raised when a requested capacity is invalid for the stack."""

    def __init__(self, requested: int, current: int, reason: str) -> None:
        self.requested = requested
        self.current = current
        super().__init__(f"invalid capacity {requested} (current {current}): {reason}")


class StaleReferenceError(StackError, RuntimeError):
    """Raised when a TopRef is used after its stack was mutated."""
