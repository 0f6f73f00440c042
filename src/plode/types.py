"""
Common types for plode.

This module provides the fundamental types shared by engines and layouts:
- Graph: Capability protocol consumed by the engines (node count + edges)
- Point: A 2D coordinate
- BoundingBox: Axis-aligned box spanned by a lower left and upper right point
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Protocol, Sequence, Tuple, Union, runtime_checkable

import numpy as np

from .validation import (
    EmptyGraphError,
    NonFiniteCoordinateError,
    validate_bounding_box_corners,
)


@runtime_checkable
class Graph(Protocol):
    """
    Minimal graph capability consumed by layout engines.

    Nodes are the integers 0..node_count()-1. Edges are (source, target)
    index pairs. Undirected edges must be listed once: every listed pair
    attracts its endpoints, so an edge listed in both directions pulls
    twice as hard.
    """

    def node_count(self) -> int:
        ...

    def edges(self) -> Sequence[Tuple[int, int]]:
        ...


@dataclass(frozen=True)
class Point:
    """A 2D coordinate."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Point(x={self.x:.2f}, y={self.y:.2f})"


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned bounding box.

    Attributes:
        lower_left: Corner with the smallest x and y
        upper_right: Corner with the largest x and y

    Raises:
        NonFiniteCoordinateError: If a corner coordinate is NaN
        InfiniteBoundingBoxError: If a corner coordinate is infinite
        InvalidBoundingBoxError: If upper_right is below or left of lower_left
    """

    lower_left: Point
    upper_right: Point

    def __post_init__(self) -> None:
        # Accept plain (x, y) tuples for either corner
        if not isinstance(self.lower_left, Point):
            object.__setattr__(self, "lower_left", Point(*map(float, self.lower_left)))
        if not isinstance(self.upper_right, Point):
            object.__setattr__(self, "upper_right", Point(*map(float, self.upper_right)))
        validate_bounding_box_corners(
            (self.lower_left.x, self.lower_left.y),
            (self.upper_right.x, self.upper_right.y),
        )

    @classmethod
    def from_positions(cls, positions: Any) -> "BoundingBox":
        """
        Compute the minimal box containing all points.

        Args:
            positions: Array-like whose last axis holds (x, y); any leading
                shape is flattened, so (N, 2) and (F, N, 2) both work.

        Raises:
            EmptyGraphError: If there are no points
            NonFiniteCoordinateError: If any coordinate is NaN
            InfiniteBoundingBoxError: If any coordinate is infinite
        """
        points = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
        if points.shape[0] == 0:
            raise EmptyGraphError("Cannot compute the bounding box of zero positions")
        if np.isnan(points).any():
            raise NonFiniteCoordinateError("Found NaN in positions")
        lo = points.min(axis=0)
        hi = points.max(axis=0)
        return cls(Point(float(lo[0]), float(lo[1])), Point(float(hi[0]), float(hi[1])))

    @classmethod
    def from_size(
        cls, width: float, height: float, origin: Tuple[float, float] = (0.0, 0.0)
    ) -> "BoundingBox":
        """Create a box of the given size with its lower left corner at origin."""
        x0, y0 = float(origin[0]), float(origin[1])
        return cls(Point(x0, y0), Point(x0 + float(width), y0 + float(height)))

    @property
    def width(self) -> float:
        return self.upper_right.x - self.lower_left.x

    @property
    def height(self) -> float:
        return self.upper_right.y - self.lower_left.y

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def size(self) -> Tuple[float, float]:
        """(width, height) of the box."""
        return (self.width, self.height)

    @property
    def is_degenerate(self) -> bool:
        """True if the box has zero width or zero height."""
        return self.width == 0 or self.height == 0

    def contains(self, point: Union[Point, Sequence[float]]) -> bool:
        """Check whether a point lies inside the box (edges included)."""
        x, y = point
        return (
            self.lower_left.x <= x <= self.upper_right.x
            and self.lower_left.y <= y <= self.upper_right.y
        )


PositionArray = np.ndarray
"""Node positions: float64 array of shape (nodes, 2), row i = (x, y) of node i."""


__all__ = [
    "Graph",
    "Point",
    "BoundingBox",
    "PositionArray",
]
