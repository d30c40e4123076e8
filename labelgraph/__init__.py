"""labelgraph - a directed labeled multigraph with shortest-path search."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    check_representation,
    debug_context,
    is_debug_enabled,
    is_representation_valid,
    set_debug_enabled,
)

# Errors
from .errors import (
    DuplicateEdgeError,
    DuplicateNodeError,
    GraphError,
    MissingNodeError,
    RepresentationError,
)

# Graphs
from .graphs import (
    Graph,
    least_weighted_path,
    node_index_map,
    path_weight,
    reconstruct_labeled_path,
    reconstruct_path,
    shortest_path,
    weight_matrix,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
    "Graph",
    "shortest_path",
    "least_weighted_path",
    "path_weight",
    "weight_matrix",
    "node_index_map",
    "reconstruct_path",
    "reconstruct_labeled_path",
    # Errors
    "GraphError",
    "DuplicateNodeError",
    "MissingNodeError",
    "DuplicateEdgeError",
    "RepresentationError",
    # Diagnostics
    "check_representation",
    "is_representation_valid",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
