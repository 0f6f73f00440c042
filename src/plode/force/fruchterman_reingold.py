"""
Fruchterman-Reingold force-directed layout engine.

Based on the paper:
"Graph Drawing by Force-directed Placement" by Fruchterman and Reingold (1991)

The engine simulates a physical system where:
- Nearby nodes repel each other (like electrical charges)
- Connected nodes attract each other (like springs)
- A "temperature" caps how far a node may move per step and cools linearly

Repulsion is computed exactly over all node pairs (O(n^2) per step).
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from ..base import Engine
from ..layout import ScatterLayoutSequence
from ..types import Graph
from ..validation import validate_ideal_edge_length, validate_node_count

# Distances below this are treated as this when dividing, so coincident
# nodes produce zero force instead of NaN.
MIN_DISTANCE = 1.0


class FruchtermanReingold(Engine):
    """
    Fruchterman-Reingold force-directed graph layout.

    Nodes start at uniformly random positions in a square of side
    L = sqrt(n) * k centred on the origin. Each step:

    - every node j is pushed away from every node i closer than 2k with
      magnitude k^2 / d (beyond 2k the push is dropped, otherwise nodes keep
      drifting outwards forever)
    - the endpoints of every listed edge are pulled together with
      magnitude d^2 / k
    - each node moves along its total displacement by at most the current
      temperature t, which starts at L / 20 and decreases linearly

    Example:
        graph = EdgeListGraph(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
        engine = FruchtermanReingold(ideal_edge_length=150, random_seed=0)

        layout = engine.compute(graph)        # final positions only
        sequence = engine.animate(graph)      # all 201 frames
        sequence.transform(BoundingBox.from_size(800, 800))
    """

    def __init__(
        self,
        *,
        ideal_edge_length: float = 150.0,
        random_seed: int = 0,
        iterations: int = 200,
    ) -> None:
        """
        Initialize Fruchterman-Reingold engine.

        Args:
            ideal_edge_length: Target distance k between connected nodes.
            random_seed: Seed for the initial placement.
            iterations: Number of simulation steps. Default 200.

        Raises:
            InvalidParameterError: If a parameter is out of range.
        """
        super().__init__(random_seed=random_seed, iterations=iterations)
        self._k: float = validate_ideal_edge_length(ideal_edge_length)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def ideal_edge_length(self) -> float:
        """Get ideal edge length k."""
        return self._k

    @ideal_edge_length.setter
    def ideal_edge_length(self, value: float) -> None:
        """Set ideal edge length k (must be positive)."""
        self._k = validate_ideal_edge_length(value)

    # -------------------------------------------------------------------------
    # Schedule
    # -------------------------------------------------------------------------

    def border_length(self, node_count: int) -> float:
        """Side length L of the square the nodes are initially placed in."""
        return math.sqrt(validate_node_count(node_count)) * self._k

    def initial_temperature(self, node_count: int) -> float:
        """Displacement cap of the first step, L / 20."""
        return self.border_length(node_count) / 20.0

    def temperatures(self, node_count: int) -> np.ndarray:
        """
        Displacement cap used at every step.

        The first step runs at t0. After step n the temperature becomes
        (1 - n / N) * t0, so the schedule is t0, t0, (1 - 1/N) t0, ...

        Returns:
            Array of length iterations, non-increasing
        """
        t0 = self.initial_temperature(node_count)
        n = self._iterations
        cooled = (1.0 - np.arange(n - 1, dtype=np.float64) / n) * t0
        return np.concatenate(([t0], cooled))

    def temperature(self, step: int, node_count: int) -> float:
        """Displacement cap used at a single step (0-based)."""
        if not 0 <= step < self._iterations:
            raise IndexError(f"Step {step} out of range [0, {self._iterations})")
        return float(self.temperatures(node_count)[step])

    # -------------------------------------------------------------------------
    # Forces
    # -------------------------------------------------------------------------

    def initial_positions(self, graph: Any) -> np.ndarray:
        """
        Random initial placement for the configured seed.

        x coordinates of all nodes are drawn first, then y coordinates,
        uniformly from [-L/2, L/2).
        """
        graph = self._prepare(graph)
        return self._initial_positions(graph.node_count())

    def _initial_positions(self, node_count: int) -> np.ndarray:
        rng = np.random.default_rng(self._random_seed)
        half = self.border_length(node_count) / 2.0
        x = rng.uniform(-half, half, size=node_count)
        y = rng.uniform(-half, half, size=node_count)
        return np.stack([x, y], axis=1)

    def repulsive_displacement(self, positions: np.ndarray) -> np.ndarray:
        """
        Repulsive displacement of every node from all other nodes.

        Args:
            positions: (nodes, 2) array

        Returns:
            (nodes, 2) array of summed displacements
        """
        pos = np.asarray(positions, dtype=np.float64)
        k = self._k

        # delta[j, i] = pos[j] - pos[i]
        delta = pos[:, np.newaxis, :] - pos[np.newaxis, :, :]
        dist = np.sqrt((delta * delta).sum(axis=2))
        safe = np.maximum(dist, MIN_DISTANCE)

        force = np.where(dist < 2.0 * k, (k * k) / safe, 0.0)
        np.fill_diagonal(force, 0.0)

        return ((delta / safe[..., np.newaxis]) * force[..., np.newaxis]).sum(axis=1)

    def attractive_displacement(self, graph: Graph, positions: np.ndarray) -> np.ndarray:
        """
        Attractive displacement of every node along the graph's edges.

        Each listed edge (u, v) pulls u towards v and v towards u once.

        Args:
            graph: Graph whose edges() are used
            positions: (nodes, 2) array

        Returns:
            (nodes, 2) array of summed displacements
        """
        return self._attractive(_edge_array(graph), np.asarray(positions, dtype=np.float64))

    def _attractive(self, edges: np.ndarray, pos: np.ndarray) -> np.ndarray:
        disp = np.zeros_like(pos)
        if len(edges) == 0:
            return disp

        src, tgt = edges[:, 0], edges[:, 1]
        delta = pos[src] - pos[tgt]
        dist = np.sqrt((delta * delta).sum(axis=1))
        pull = (delta / np.maximum(dist, MIN_DISTANCE)[:, np.newaxis]) * (
            (dist * dist) / self._k
        )[:, np.newaxis]

        # add.at accumulates repeated indices
        np.subtract.at(disp, src, pull)
        np.add.at(disp, tgt, pull)
        return disp

    # -------------------------------------------------------------------------
    # Layout Implementation
    # -------------------------------------------------------------------------

    def animate(self, graph: Any) -> ScatterLayoutSequence:
        """
        Run the simulation and record every step.

        Args:
            graph: A Graph, or a networkx graph

        Returns:
            iterations + 1 frames; frame 0 is the random placement

        Raises:
            EmptyGraphError: If the graph has no nodes.
            InvalidLinkError: If an edge references an invalid node index.
        """
        graph = self._prepare(graph)
        node_count = graph.node_count()
        edges = _edge_array(graph)

        pos = self._initial_positions(node_count)
        frames = [pos]

        for t in self.temperatures(node_count):
            disp = self.repulsive_displacement(pos) + self._attractive(edges, pos)

            # Cap each node's step at the temperature, keeping its direction
            norm = np.maximum(1.0, np.sqrt((disp * disp).sum(axis=1)))
            step = (disp / norm[:, np.newaxis]) * np.minimum(t, norm)[:, np.newaxis]
            pos = pos + step

            frames.append(pos)

        return ScatterLayoutSequence(graph, frames)

    def __repr__(self) -> str:
        return (
            f"FruchtermanReingold(ideal_edge_length={self._k}, "
            f"random_seed={self._random_seed}, iterations={self._iterations})"
        )


def _edge_array(graph: Graph) -> np.ndarray:
    """(edges, 2) integer array of a graph's edge list."""
    return np.asarray(list(graph.edges()), dtype=np.intp).reshape(-1, 2)


__all__ = ["FruchtermanReingold", "MIN_DISTANCE"]
