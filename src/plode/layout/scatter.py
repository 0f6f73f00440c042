"""
Scatter layouts: nodes at real valued positions in 2D space.

- ScatterLayout: one validated snapshot of node positions
- ScatterLayoutSequence: the snapshots recorded during a simulation, with a
  single bounding box over all of them so frames can be rendered into one
  viewport without jumping in scale
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

import numpy as np

from ..types import BoundingBox, Graph, Point
from ..validation import (
    DegenerateBoundingBoxError,
    validate_frames,
    validate_positions,
)


def _read_only(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


def _rescale(positions: np.ndarray, source: BoundingBox, target: BoundingBox) -> np.ndarray:
    """Map positions from source to target, each axis independently."""
    if source.is_degenerate:
        raise DegenerateBoundingBoxError(
            f"Cannot rescale from a bounding box of size {source.size}; "
            "all nodes share a coordinate on at least one axis"
        )
    lower = np.array([source.lower_left.x, source.lower_left.y])
    scale = np.array([target.width / source.width, target.height / source.height])
    offset = np.array([target.lower_left.x, target.lower_left.y])
    return (positions - lower) * scale + offset


class ScatterLayout:
    """
    A layout where nodes have a real valued position in 2D space.

    The positions are copied and frozen at construction; the bounding box
    is computed once. transform() returns a new layout.

    Example:
        layout = ScatterLayout(graph, [[0.0, 0.0], [1.0, 1.0]])
        layout.bounding_box          # BoundingBox(Point(0, 0), Point(1, 1))
        layout.coordinate(1)         # Point(x=1.00, y=1.00)
        layout.transform(BoundingBox.from_size(800, 600))

    Raises:
        ShapeMismatchError: If the positions do not have shape (node_count, 2)
        NonFiniteCoordinateError: If any coordinate is NaN
        InfiniteBoundingBoxError: If any coordinate is infinite
    """

    __slots__ = ("_graph", "_positions", "_bbox")

    def __init__(self, graph: Graph, positions: Any) -> None:
        array = validate_positions(positions, graph.node_count())
        self._bbox = BoundingBox.from_positions(array)
        self._positions = _read_only(array.copy())
        self._graph = graph

    @property
    def graph(self) -> Graph:
        """The graph these positions belong to."""
        return self._graph

    @property
    def positions(self) -> np.ndarray:
        """Read-only (nodes, 2) array of positions."""
        return self._positions

    @property
    def node_count(self) -> int:
        return self._positions.shape[0]

    @property
    def bounding_box(self) -> BoundingBox:
        """The bounding box that encompasses all nodes."""
        return self._bbox

    def bbox(self) -> BoundingBox:
        """Alias of bounding_box."""
        return self._bbox

    def coordinate(self, node: int) -> Point:
        """Get the location of a node."""
        if not 0 <= node < self.node_count:
            raise IndexError(f"Node index {node} out of range [0, {self.node_count})")
        x, y = self._positions[node]
        return Point(float(x), float(y))

    def edge_lengths(self) -> np.ndarray:
        """Euclidean length of every graph edge, in the order of graph.edges()."""
        edges = np.asarray(list(self._graph.edges()), dtype=np.intp).reshape(-1, 2)
        delta = self._positions[edges[:, 0]] - self._positions[edges[:, 1]]
        return np.sqrt((delta * delta).sum(axis=1))

    def transform(self, target: BoundingBox) -> "ScatterLayout":
        """
        Translate and scale so the layout fills the target bounding box.

        Raises:
            DegenerateBoundingBoxError: If this layout has zero width or height
        """
        return ScatterLayout(self._graph, _rescale(self._positions, self._bbox, target))

    def __repr__(self) -> str:
        return f"ScatterLayout(nodes={self.node_count}, bbox={self._bbox})"


class ScatterLayoutSequence:
    """
    A sequence of scatter layouts recording the progress of a simulation.

    All frames share one graph and one bounding box computed over every
    frame. Iterating yields ScatterLayout frames in order.

    Raises:
        EmptySequenceError: If no frames are given
        ShapeMismatchError: If any frame does not have shape (node_count, 2)
        NonFiniteCoordinateError: If any coordinate is NaN
        InfiniteBoundingBoxError: If any coordinate is infinite
    """

    __slots__ = ("_graph", "_positions", "_bbox")

    def __init__(self, graph: Graph, frames: Sequence[Any]) -> None:
        stacked = validate_frames(frames, graph.node_count())
        self._bbox = BoundingBox.from_positions(stacked)
        self._positions = _read_only(stacked)
        self._graph = graph

    @classmethod
    def _from_array(cls, graph: Graph, positions: np.ndarray) -> "ScatterLayoutSequence":
        return cls(graph, list(positions))

    @property
    def graph(self) -> Graph:
        """The graph all frames belong to."""
        return self._graph

    @property
    def positions(self) -> np.ndarray:
        """Read-only (frames, nodes, 2) array of positions."""
        return self._positions

    @property
    def node_count(self) -> int:
        return self._positions.shape[1]

    @property
    def frame_count(self) -> int:
        """The number of individual layout frames in the sequence."""
        return self._positions.shape[0]

    @property
    def bounding_box(self) -> BoundingBox:
        """The bounding box that encompasses all nodes in all frames."""
        return self._bbox

    def bbox(self) -> BoundingBox:
        """Alias of bounding_box."""
        return self._bbox

    def frame(self, index: int) -> ScatterLayout:
        """
        Get one frame as a ScatterLayout.

        Negative indices count from the end. The frame's bounding box is its
        own, not the sequence's joint box.
        """
        if not -self.frame_count <= index < self.frame_count:
            raise IndexError(f"Frame index {index} out of range for {self.frame_count} frames")
        return ScatterLayout(self._graph, self._positions[index])

    @property
    def first_frame(self) -> ScatterLayout:
        return self.frame(0)

    @property
    def last_frame(self) -> ScatterLayout:
        """The final frame, i.e. the converged layout."""
        return self.frame(-1)

    def coordinate(self, frame: int, node: int) -> Point:
        """Get the location of a node in a frame."""
        if not -self.frame_count <= frame < self.frame_count:
            raise IndexError(f"Frame index {frame} out of range for {self.frame_count} frames")
        if not 0 <= node < self.node_count:
            raise IndexError(f"Node index {node} out of range [0, {self.node_count})")
        x, y = self._positions[frame, node]
        return Point(float(x), float(y))

    def transform(self, target: BoundingBox) -> "ScatterLayoutSequence":
        """
        Translate and scale every frame using the joint bounding box.

        Relative motion across frames is preserved.

        Raises:
            DegenerateBoundingBoxError: If the joint box has zero width or height
        """
        return self._from_array(self._graph, _rescale(self._positions, self._bbox, target))

    def __len__(self) -> int:
        return self.frame_count

    def __getitem__(self, index: int) -> ScatterLayout:
        return self.frame(index)

    def __iter__(self) -> Iterator[ScatterLayout]:
        for index in range(self.frame_count):
            yield self.frame(index)

    def __repr__(self) -> str:
        return (
            f"ScatterLayoutSequence(frames={self.frame_count}, "
            f"nodes={self.node_count}, bbox={self._bbox})"
        )


__all__ = ["ScatterLayout", "ScatterLayoutSequence"]
