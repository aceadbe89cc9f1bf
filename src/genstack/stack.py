"""Generic LIFO stack over a preallocated slot buffer."""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Generic, Iterable, TypeVar

from genstack.config import DEFAULT_GROWTH, GrowthPolicy
from genstack.errors import (
    CapacityError,
    EmptyStackError,
    InsufficientElementsError,
    StaleReferenceError,
)
from genstack.format import DEFAULT_FORMAT, FormatOptions, render_items

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Stack(Generic[T]):
    """Last-in-first-out container with explicit capacity management.

    Items live in the first ``length`` slots of a buffer of ``capacity``
    slots; the last live slot is the top. A full buffer is reallocated
    according to the stack's GrowthPolicy, so push is amortized O(1).

    Any mutating call (push, pop, clear, growth) invalidates previously
    issued TopRef handles.
    """

    def __init__(
        self,
        items: Iterable[T] | None = None,
        *,
        capacity: int = 0,
        growth: GrowthPolicy = DEFAULT_GROWTH,
    ) -> None:
        if capacity < 0:
            raise CapacityError(capacity, 0, "capacity cannot be negative")
        self._slots: list[T | None] = [None] * capacity
        self._length = 0
        self._growth = growth
        self._version = 0
        if items is not None:
            self.push_many(items)

    @classmethod
    def from_items(cls, items: Iterable[T]) -> Stack[T]:
        """Build a stack by pushing ``items`` in order; the last one ends on top."""
        return cls(items)

    # -- Queries ------------------------------------------------------------

    @property
    def length(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def is_empty(self) -> bool:
        return self._length == 0

    def has_items(self) -> bool:
        return self._length > 0

    # -- Push ---------------------------------------------------------------

    def push(self, item: T) -> None:
        """Place ``item`` on top, growing the buffer if it is full."""
        if self._length == len(self._slots):
            self._reallocate(self._growth.next_capacity(len(self._slots)))
        self._slots[self._length] = item
        self._length += 1
        self._version += 1

    def push_many(self, items: Iterable[T]) -> None:
        """Push each item in order; the last one ends on top."""
        for item in items:
            self.push(item)

    # -- Pop and peek -------------------------------------------------------

    def pop(self) -> T:
        """Remove and return the top item.

        Raises:
            EmptyStackError: If the stack is empty.
        """
        if self._length == 0:
            raise EmptyStackError("pop")
        item = self._take_top()
        self._version += 1
        return item

    def pop_up_to(self, n: int) -> list[T]:
        """Pop at most ``n`` items, most recently pushed first.

        Never fails on a short or empty stack; fewer items are returned instead.
        """
        _check_count(n)
        popped = [self._take_top() for _ in range(min(n, self._length))]
        self._version += 1
        return popped

    def pop_exact(self, n: int) -> list[T]:
        """Pop exactly ``n`` items, most recently pushed first.

        Raises:
            InsufficientElementsError: If fewer than ``n`` items are present.
                Nothing is removed in that case.
        """
        _check_count(n)
        if n > self._length:
            raise InsufficientElementsError(n, self._length)
        return self.pop_up_to(n)

    def top(self) -> T:
        """Return a shallow copy of the top item without removing it.

        Raises:
            EmptyStackError: If the stack is empty.
        """
        if self._length == 0:
            raise EmptyStackError("top")
        return copy.copy(self._slots[self._length - 1])

    def top_ref(self) -> TopRef[T]:
        """Return a handle for reading and replacing the top item in place.

        The handle stops working at the next mutating call on this stack.

        Raises:
            EmptyStackError: If the stack is empty.
        """
        if self._length == 0:
            raise EmptyStackError("top_ref")
        return TopRef(self)

    # -- Capacity -----------------------------------------------------------

    def clear(self) -> None:
        """Remove all items, keeping the current capacity."""
        for i in range(self._length):
            self._slots[i] = None
        self._length = 0
        self._version += 1

    def clear_with_capacity(self, capacity: int) -> None:
        """Remove all items and set the capacity to exactly ``capacity``.

        Raises:
            CapacityError: If ``capacity`` is negative.
        """
        if capacity < 0:
            raise CapacityError(capacity, self.capacity, "capacity cannot be negative")
        if capacity == len(self._slots):
            self.clear()
            return
        logger.debug("Resetting stack buffer from %d to %d slots", len(self._slots), capacity)
        self._slots = [None] * capacity
        self._length = 0
        self._version += 1

    def grow_capacity_to(self, capacity: int) -> None:
        """Reallocate the buffer to ``capacity`` slots, keeping all items.

        Raises:
            CapacityError: If ``capacity`` is below the current capacity.
                Use clear_with_capacity to shrink.
        """
        if capacity < len(self._slots):
            raise CapacityError(
                capacity,
                len(self._slots),
                "capacity can only grow, use clear_with_capacity to shrink",
            )
        if capacity == len(self._slots):
            return
        self._reallocate(capacity)
        self._version += 1

    # -- Rendering ----------------------------------------------------------

    def render(self, options: FormatOptions[T] | None = None, **changes: Any) -> str:
        """Render the items as text.

        Keyword arguments override single fields of ``options``, e.g.
        ``stack.render(separator=", ", top_first=False)``.
        """
        if options is None:
            options = DEFAULT_FORMAT
        if changes:
            options = options.with_changes(**changes)
        return render_items(self._slots[: self._length], options)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Stack({self._slots[: self._length]!r}, capacity={len(self._slots)})"

    # -- Internal -----------------------------------------------------------

    def _take_top(self) -> T:
        self._length -= 1
        item = self._slots[self._length]
        self._slots[self._length] = None
        return item  # type: ignore[return-value]

    def _reallocate(self, capacity: int) -> None:
        logger.debug(
            "Growing stack buffer from %d to %d slots (%d items)",
            len(self._slots),
            capacity,
            self._length,
        )
        self._slots = self._slots[: self._length] + [None] * (capacity - self._length)


class TopRef(Generic[T]):
    """In-place access to the top slot of a Stack.

    Valid until the stack is next mutated; any later use raises
    StaleReferenceError. Writing through the handle does not invalidate it.
    """

    __slots__ = ("_stack", "_version")

    def __init__(self, stack: Stack[T]) -> None:
        self._stack = stack
        self._version = stack._version

    @property
    def valid(self) -> bool:
        return self._stack._version == self._version

    def _index(self) -> int:
        if not self.valid:
            raise StaleReferenceError("top reference used after the stack was modified")
        return self._stack._length - 1

    def get(self) -> T:
        """Return the top item itself (not a copy)."""
        return self._stack._slots[self._index()]  # type: ignore[return-value]

    def set(self, value: T) -> None:
        """Replace the top item."""
        self._stack._slots[self._index()] = value

    @property
    def value(self) -> T:
        return self.get()

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    def update(self, fn: Callable[[T], T]) -> T:
        """Replace the top item with ``fn(top)`` and return the new value."""
        index = self._index()
        self._stack._slots[index] = fn(self._stack._slots[index])  # type: ignore[arg-type]
        return self._stack._slots[index]  # type: ignore[return-value]


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count cannot be negative, got {n}")
