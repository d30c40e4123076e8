"""Diagnostics and debugging utilities for labelgraph."""

from .core import (
    check_representation,
    find_representation_violation,
    is_representation_valid,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
    should_check_representation,
)

__all__ = [
    "check_representation",
    "find_representation_violation",
    "is_representation_valid",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "should_check_representation",
]
