"""
Input validation utilities for plode.

Provides centralized validation functions for graphs, position arrays,
bounding boxes and engine parameters. Raises descriptive exceptions on
invalid input and emits GraphStructureWarning for graphs that are legal
but probably not what the caller meant.
"""

from __future__ import annotations

import math
import warnings
from typing import Any, Optional, Sequence

import numpy as np

# Keeps k * k and squared distances of n * k scale finite in float64
MAX_IDEAL_EDGE_LENGTH = 1e150


class ValidationError(ValueError):
    """Base exception for layout validation errors."""

    pass


class InvalidParameterError(ValidationError):
    """Raised when an engine parameter is out of range."""

    pass


class InvalidLinkError(ValidationError):
    """Raised when an edge references invalid nodes."""

    pass


class EmptyGraphError(ValidationError):
    """Raised when a layout is requested for a graph without nodes."""

    pass


class ShapeMismatchError(ValidationError):
    """Raised when a position array does not match the graph."""

    pass


class NonFiniteCoordinateError(ValidationError):
    """Raised when positions contain NaN."""

    pass


class EmptySequenceError(ValidationError):
    """Raised when a layout sequence is built from zero frames."""

    pass


class BoundingBoxError(ValidationError):
    """Base exception for unusable bounding boxes."""

    pass


class InfiniteBoundingBoxError(BoundingBoxError):
    """Raised when a bounding box has an infinite corner."""

    pass


class DegenerateBoundingBoxError(BoundingBoxError):
    """Raised when a zero width or height box is used as a transform source."""

    pass


class InvalidBoundingBoxError(BoundingBoxError):
    """Raised when the upper right corner lies below or left of the lower left one."""

    pass


class GraphStructureWarning(UserWarning):
    """Warning for graph structures that change how forces are applied."""

    pass


def validate_node_count(node_count: int) -> int:
    """
    Validate that a graph has at least one node.

    Args:
        node_count: Number of nodes reported by the graph

    Returns:
        Validated node count

    Raises:
        EmptyGraphError: If node_count < 1
    """
    if node_count < 1:
        raise EmptyGraphError(f"Cannot lay out a graph with {node_count} nodes")
    return node_count


def validate_edges(
    edges: Sequence[Any],
    node_count: int,
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that all edge endpoints are node indices within bounds.

    Args:
        edges: Sequence of (source, target) pairs
        node_count: Number of nodes in the graph
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (edge_index, issue_description) tuples

    Raises:
        InvalidLinkError: If strict=True and invalid edges found
    """
    issues: list[tuple[int, str]] = []

    for i, edge in enumerate(edges):
        try:
            src, tgt = edge
        except (TypeError, ValueError):
            issues.append((i, f"Edge {i}: expected a (source, target) pair, got {edge!r}"))
            continue

        for role, idx in (("source", src), ("target", tgt)):
            if not isinstance(idx, (int, np.integer)) or isinstance(idx, bool):
                issues.append((i, f"Edge {i}: {role} {idx!r} is not an integer index"))
            elif idx < 0 or idx >= node_count:
                issues.append(
                    (i, f"Edge {i}: {role} index {idx} out of bounds [0, {node_count})")
                )

    if strict and issues:
        msg = "Invalid edge indices:\n" + "\n".join(issue[1] for issue in issues)
        raise InvalidLinkError(msg)

    return issues


def check_edge_structure(edges: Sequence[tuple[int, int]], stacklevel: int = 3) -> None:
    """
    Warn about edges that distort the attractive forces.

    Edges are treated as undirected and applied once per listed pair, so a
    pair listed twice, in either direction, is pulled together twice as hard.
    Self-loops exert no force at all.

    Args:
        edges: Validated (source, target) pairs
        stacklevel: Passed through to warnings.warn
    """
    seen: set[tuple[int, int]] = set()
    repeated_pairs: list[tuple[int, int]] = []
    reversed_pairs: list[tuple[int, int]] = []
    self_loops = 0

    for src, tgt in edges:
        src, tgt = int(src), int(tgt)
        if src == tgt:
            self_loops += 1
            continue
        if (src, tgt) in seen:
            repeated_pairs.append((src, tgt))
        elif (tgt, src) in seen:
            reversed_pairs.append((src, tgt))
        seen.add((src, tgt))

    if repeated_pairs:
        sample = ", ".join(str(p) for p in repeated_pairs[:3])
        warnings.warn(
            f"Found {len(repeated_pairs)} repeated edge(s) ({sample}). "
            "Each listed edge attracts its endpoints, so these pairs are pulled "
            "together more strongly. List each edge once.",
            GraphStructureWarning,
            stacklevel=stacklevel,
        )
    if reversed_pairs:
        sample = ", ".join(str(p) for p in reversed_pairs[:3])
        warnings.warn(
            f"Found {len(reversed_pairs)} edge(s) listed in both directions ({sample}). "
            "Each listed edge attracts its endpoints, so these pairs are pulled "
            "together twice as strongly. List undirected edges once.",
            GraphStructureWarning,
            stacklevel=stacklevel,
        )
    if self_loops:
        warnings.warn(
            f"Found {self_loops} self-loop(s). Self-loops exert no force and are ignored.",
            GraphStructureWarning,
            stacklevel=stacklevel,
        )


def validate_positions(positions: Any, node_count: int) -> np.ndarray:
    """
    Validate a single position matrix against a graph.

    Args:
        positions: Array-like of shape (node_count, 2)
        node_count: Number of nodes in the graph

    Returns:
        float64 array of shape (node_count, 2)

    Raises:
        ShapeMismatchError: If the shape does not match the graph
        NonFiniteCoordinateError: If any coordinate is NaN
    """
    array = np.asarray(positions, dtype=np.float64)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ShapeMismatchError(
            f"Positions must have shape (nodes, 2), got {array.shape}"
        )
    if array.shape[0] != node_count:
        raise ShapeMismatchError(
            f"Node count {node_count} does not match position shape {array.shape[0]}"
        )
    if np.isnan(array).any():
        raise NonFiniteCoordinateError("Found NaN in positions")
    return array


def validate_frames(frames: Sequence[Any], node_count: int) -> np.ndarray:
    """
    Validate and stack the frames of a layout sequence.

    Args:
        frames: Sequence of array-likes, each of shape (node_count, 2)
        node_count: Number of nodes in the graph

    Returns:
        float64 array of shape (len(frames), node_count, 2)

    Raises:
        EmptySequenceError: If frames is empty
        ShapeMismatchError: If any frame does not match the graph
        NonFiniteCoordinateError: If any coordinate is NaN
    """
    if len(frames) == 0:
        raise EmptySequenceError("Need at least one step")

    arrays = [np.asarray(frame, dtype=np.float64) for frame in frames]
    bad = [
        f for f, array in enumerate(arrays)
        if array.ndim != 2 or array.shape != (node_count, 2)
    ]
    if bad:
        raise ShapeMismatchError(
            f"Node count {node_count} does not match layout shape for frame(s) {bad[:5]}"
        )

    stacked = np.stack(arrays, axis=0)
    if np.isnan(stacked).any():
        raise NonFiniteCoordinateError("Found NaN in positions")
    return stacked


def validate_bounding_box_corners(
    lower_left: tuple[float, float],
    upper_right: tuple[float, float],
) -> None:
    """
    Validate the corners of a bounding box.

    Raises:
        NonFiniteCoordinateError: If a corner coordinate is NaN
        InfiniteBoundingBoxError: If a corner coordinate is infinite
        InvalidBoundingBoxError: If upper_right < lower_left on either axis
    """
    coords = (*lower_left, *upper_right)
    if any(math.isnan(c) for c in coords):
        raise NonFiniteCoordinateError(f"Bounding box has NaN corner: {coords}")
    if any(math.isinf(c) for c in coords):
        raise InfiniteBoundingBoxError("Infinite size bounding box.")
    if upper_right[0] < lower_left[0] or upper_right[1] < lower_left[1]:
        raise InvalidBoundingBoxError(
            f"Upper right corner {upper_right} lies below or left of "
            f"lower left corner {lower_left}"
        )


def validate_ideal_edge_length(k: float) -> float:
    """
    Validate the ideal edge length is a finite positive number.

    Squared distances and k * k must stay representable as float64, so k is
    capped at MAX_IDEAL_EDGE_LENGTH.

    Raises:
        InvalidParameterError: If k is not finite, not > 0, or above the cap
    """
    k = float(k)
    if not math.isfinite(k) or k <= 0:
        raise InvalidParameterError(f"ideal_edge_length must be positive, got {k}")
    if k > MAX_IDEAL_EDGE_LENGTH:
        raise InvalidParameterError(
            f"ideal_edge_length must be <= {MAX_IDEAL_EDGE_LENGTH:g}, got {k:g}"
        )
    return k


def validate_iterations(iterations: int) -> int:
    """
    Validate iteration count is positive.

    Args:
        iterations: Number of iterations

    Returns:
        Validated iteration count

    Raises:
        InvalidParameterError: If iterations < 1
    """
    if iterations < 1:
        raise InvalidParameterError(f"iterations must be >= 1, got {iterations}")
    return int(iterations)


def validate_seed(seed: Optional[int]) -> int:
    """Validate a random seed is a non-negative integer."""
    if seed is None or isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise InvalidParameterError(f"random_seed must be an integer, got {seed!r}")
    if seed < 0:
        raise InvalidParameterError(f"random_seed must be non-negative, got {seed}")
    return int(seed)


__all__ = [
    "MAX_IDEAL_EDGE_LENGTH",
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
    "validate_node_count",
    "validate_edges",
    "check_edge_structure",
    "validate_positions",
    "validate_frames",
    "validate_bounding_box_corners",
    "validate_ideal_edge_length",
    "validate_iterations",
    "validate_seed",
]
