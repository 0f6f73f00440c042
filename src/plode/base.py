"""
Base class for layout engines.

An engine turns a graph into coordinates. Every engine offers two
operations:

- animate(graph): the positions of every simulation step as a
  ScatterLayoutSequence (frame 0 is the initial placement)
- compute(graph): only the final step, as a ScatterLayout

Engines are configured through keyword arguments mirrored by validated
properties. They keep no state between runs, so repeated calls with the
same configuration produce identical results.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing_extensions import Self

from .graph import as_graph
from .layout import ScatterLayout, ScatterLayoutSequence
from .types import Graph
from .validation import (
    check_edge_structure,
    validate_edges,
    validate_iterations,
    validate_node_count,
    validate_seed,
)


class Engine(ABC):
    """
    Abstract base class for iterative layout engines.

    Provides shared infrastructure:
    - Seed and iteration count management via properties
    - Graph validation before a run
    - compute() in terms of animate()

    Example:
        engine = SomeEngine(random_seed=7, iterations=100)
        sequence = engine.animate(graph)
        for frame in sequence:
            draw(frame)
    """

    def __init__(self, *, random_seed: int = 0, iterations: int = 200) -> None:
        """
        Initialize engine with configuration.

        Args:
            random_seed: Seed for the initial random placement
            iterations: Number of simulation steps

        Raises:
            InvalidParameterError: If a parameter is out of range.
        """
        self._random_seed: int = validate_seed(random_seed)
        self._iterations: int = validate_iterations(iterations)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def random_seed(self) -> int:
        """Get random seed for reproducible layouts."""
        return self._random_seed

    @random_seed.setter
    def random_seed(self, value: int) -> None:
        """Set random seed for reproducible layouts."""
        self._random_seed = validate_seed(value)

    @property
    def iterations(self) -> int:
        """Get number of simulation steps."""
        return self._iterations

    @iterations.setter
    def iterations(self, value: int) -> None:
        """Set number of simulation steps (minimum 1)."""
        self._iterations = validate_iterations(value)

    def with_options(self, **options: Any) -> Self:
        """
        Return a copy of this engine with some options changed.

        Example:
            runs = [engine.with_options(random_seed=s).compute(g) for s in range(10)]

        Raises:
            AttributeError: If an option is not a property of the engine.
            InvalidParameterError: If a value is out of range.
        """
        clone = copy.copy(self)
        for name, value in options.items():
            if not isinstance(getattr(type(clone), name, None), property):
                raise AttributeError(f"{type(self).__name__} has no option {name!r}")
            setattr(clone, name, value)
        return clone

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    def compute(self, graph: Any) -> ScatterLayout:
        """
        Run the engine and return only the final layout.

        Args:
            graph: A Graph, or a networkx graph

        Returns:
            The last frame of animate(graph)
        """
        return self.animate(graph).last_frame

    @abstractmethod
    def animate(self, graph: Any) -> ScatterLayoutSequence:
        """
        Run the engine and record every step.

        Args:
            graph: A Graph, or a networkx graph

        Returns:
            iterations + 1 frames, from the initial placement to the result
        """
        pass

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def _prepare(self, graph: Any) -> Graph:
        """
        Validate a graph before a run.

        Raises:
            TypeError: If graph is not a supported graph object.
            EmptyGraphError: If the graph has no nodes.
            InvalidLinkError: If any edge references an invalid node index.
        """
        graph = as_graph(graph)
        node_count = validate_node_count(graph.node_count())
        edges = list(graph.edges())
        validate_edges(edges, node_count, strict=True)
        check_edge_structure(edges, stacklevel=4)
        return graph


__all__ = ["Engine"]
