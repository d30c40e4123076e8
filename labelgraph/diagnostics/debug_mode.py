"""Debug mode management for labelgraph.

Debug mode turns on the representation check that graphs run after every
mutation. It is read from the LABELGRAPH_DEBUG environment variable at
import and can be changed at runtime.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

from ..logging import get_logger

logger = get_logger(__name__)

_DEBUG_ENV_VAR = "LABELGRAPH_DEBUG"
_TRUE_VALUES = ("1", "true", "yes", "on")

_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in _TRUE_VALUES

if _debug_enabled:
    logger.info("Graph representation checks enabled by %s", _DEBUG_ENV_VAR)


def is_debug_enabled() -> bool:
    """
    Return whether labelgraph debug mode is currently enabled.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable labelgraph debug mode.

    Only graphs constructed without ``disable_check_rep=True`` are affected.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    enabled = bool(enabled)
    if enabled != _debug_enabled:
        logger.info(
            "Graph representation checks %s", "enabled" if enabled else "disabled"
        )
    _debug_enabled = enabled


def should_check_representation(disable_check_rep: bool) -> bool:
    """
    Decide whether a graph validates its representation after a mutation.

    Parameters
    ----------
    disable_check_rep:
        The graph's own opt-out, as passed to ``Graph(...)``.

    Returns
    -------
    bool
        True when debug mode is on and the graph has not opted out.
    """
    return _debug_enabled and not disable_check_rep


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode within the context.

    Example
    -------
    >>> with debug_context(True):
    ...     graph.add_node("A")  # representation checked after the insert
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    logger.debug("Entering debug context (enabled=%s)", _debug_enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
