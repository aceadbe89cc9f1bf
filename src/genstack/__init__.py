"""genstack: generic LIFO stack with capacity control and configurable rendering."""

# Configuration
from genstack.config import DEFAULT_GROWTH, GrowthPolicy

# Errors
from genstack.errors import (
    CapacityError,
    EmptyStackError,
    InsufficientElementsError,
    StackError,
    StaleReferenceError,
)

# Formatting
from genstack.format import (
    DEFAULT_END,
    DEFAULT_FORMAT,
    DEFAULT_SEPARATOR,
    DEFAULT_START,
    DEFAULT_TOP_FIRST,
    FormatOptions,
    default_conversion,
    render_items,
)

# Core stack
from genstack.stack import Stack, TopRef

__all__ = [
    # Configuration
    "DEFAULT_GROWTH",
    "GrowthPolicy",
    # Errors
    "CapacityError",
    "EmptyStackError",
    "InsufficientElementsError",
    "StackError",
    "StaleReferenceError",
    # Formatting
    "DEFAULT_END",
    "DEFAULT_FORMAT",
    "DEFAULT_SEPARATOR",
    "DEFAULT_START",
    "DEFAULT_TOP_FIRST",
    "FormatOptions",
    "default_conversion",
    "render_items",
    # Core stack
    "Stack",
    "TopRef",
]
