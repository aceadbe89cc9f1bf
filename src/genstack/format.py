"""String rendering of stack contents."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_START = "["
DEFAULT_END = "]"
DEFAULT_SEPARATOR = " "
DEFAULT_TOP_FIRST = True


def default_conversion(item: Any) -> str:
    """Convert an item with its own ``__str__``."""
    return str(item)


@dataclass(frozen=True)
class FormatOptions(Generic[T]):
    """How a stack is rendered.

    Attributes:
        conversion: Turns each item into its text; None means default_conversion.
        start: Written before the first item.
        end: Written after the last item.
        separator: Written between two consecutive items.
        top_first: Render from the top down when True, from the bottom up otherwise.
    """

    conversion: Callable[[T], str] | None = default_conversion
    start: str = DEFAULT_START
    end: str = DEFAULT_END
    separator: str = DEFAULT_SEPARATOR
    top_first: bool = DEFAULT_TOP_FIRST

    def with_changes(self, **changes: Any) -> FormatOptions[T]:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_FORMAT: FormatOptions[Any] = FormatOptions()


def render_items(items: Sequence[T], options: FormatOptions[T] | None = None) -> str:
    """Render ``items`` (ordered bottom to top) according to ``options``.

    An empty sequence renders as ``start + end`` with no separator. A
    ``conversion`` of None falls back to default_conversion.
    """
    if options is None:
        options = DEFAULT_FORMAT
    if not items:
        return options.start + options.end

    conversion = options.conversion or default_conversion
    ordered = reversed(items) if options.top_first else iter(items)
    body = options.separator.join(conversion(item) for item in ordered)
    return f"{options.start}{body}{options.end}"
