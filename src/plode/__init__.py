"""
plode: Force-directed graph layouts as coordinate data.

This package computes 2D node positions for graphs and hands them to a
rendering layer, either as a single snapshot or as every step of the
simulation for animation.

Available engines:
- force: Fruchterman-Reingold force-directed placement
"""

__version__ = "0.2.0"

# Base class for building engines
from .base import Engine

# Force-directed engines
from .force import FruchtermanReingold

# Example graphs
from .generators import (
    complete_graph,
    cycle_graph,
    defined_graphs,
    grid_graph,
    path_graph,
    random_graph,
    star_graph,
)

# Graph adapters
from .graph import EdgeListGraph, NetworkXGraph, as_graph

# Layout data types
from .layout import ScatterLayout, ScatterLayoutSequence

# Shared types
from .types import BoundingBox, Graph, Point, PositionArray

# Validation utilities
from .validation import (
    BoundingBoxError,
    DegenerateBoundingBoxError,
    EmptyGraphError,
    EmptySequenceError,
    GraphStructureWarning,
    InfiniteBoundingBoxError,
    InvalidBoundingBoxError,
    InvalidLinkError,
    InvalidParameterError,
    NonFiniteCoordinateError,
    ShapeMismatchError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Graph",
    "Point",
    "BoundingBox",
    "PositionArray",
    # Graph adapters
    "EdgeListGraph",
    "NetworkXGraph",
    "as_graph",
    # Layouts
    "ScatterLayout",
    "ScatterLayoutSequence",
    # Engines
    "Engine",
    "FruchtermanReingold",
    # Example graphs
    "path_graph",
    "cycle_graph",
    "star_graph",
    "complete_graph",
    "grid_graph",
    "random_graph",
    "defined_graphs",
    # Validation
    "ValidationError",
    "InvalidParameterError",
    "InvalidLinkError",
    "EmptyGraphError",
    "ShapeMismatchError",
    "NonFiniteCoordinateError",
    "EmptySequenceError",
    "BoundingBoxError",
    "InfiniteBoundingBoxError",
    "DegenerateBoundingBoxError",
    "InvalidBoundingBoxError",
    "GraphStructureWarning",
]
