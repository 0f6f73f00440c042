"""
Tests for ScatterLayout and ScatterLayoutSequence.
"""

import numpy as np
import pytest

from plode import (
    BoundingBox,
    DegenerateBoundingBoxError,
    EdgeListGraph,
    EmptySequenceError,
    InfiniteBoundingBoxError,
    NonFiniteCoordinateError,
    Point,
    ScatterLayout,
    ScatterLayoutSequence,
    ShapeMismatchError,
    ValidationError,
)


def two_node_graph():
    return EdgeListGraph(2, [(0, 1)])


class IteratorEdgesGraph:
    """Graph whose edges() hands out a fresh iterator."""

    def __init__(self, node_count, edges):
        self._node_count = node_count
        self._edges = edges

    def node_count(self):
        return self._node_count

    def edges(self):
        return iter(self._edges)


class TestScatterLayoutValidation:
    """Construction rejects positions that do not fit the graph."""

    def test_success(self):
        """Matching finite positions are accepted."""
        layout = ScatterLayout(two_node_graph(), [[0.0, 0.0], [1.0, 1.0]])
        assert layout.node_count == 2

    def test_fail_on_count_mismatch(self):
        """More rows than nodes raises ShapeMismatchError."""
        with pytest.raises(ShapeMismatchError, match="does not match"):
            ScatterLayout(two_node_graph(), [[1.0, 1.0], [1.0, 1.0], [1.0, 1.0]])

    def test_fail_on_wrong_columns(self):
        """Positions must be 2D points."""
        with pytest.raises(ShapeMismatchError):
            ScatterLayout(two_node_graph(), [[1.0, 1.0, 1.0], [1.0, 1.0, 1.0]])

    def test_fail_on_nan(self):
        """NaN coordinates raise NonFiniteCoordinateError."""
        with pytest.raises(NonFiniteCoordinateError):
            ScatterLayout(two_node_graph(), [[0.0, np.nan], [0.0, 0.0]])

    def test_fail_on_inf(self):
        """Infinite coordinates raise InfiniteBoundingBoxError."""
        with pytest.raises(InfiniteBoundingBoxError):
            ScatterLayout(two_node_graph(), [[np.inf, 1.0], [1.0, 1.0]])

    def test_errors_are_validation_errors(self):
        """All construction failures share a base class."""
        with pytest.raises(ValidationError):
            ScatterLayout(two_node_graph(), [[0.0, 0.0]])


class TestScatterLayoutAccess:
    """Reading coordinates and bounding boxes."""

    def test_bounding_box(self):
        """The box spans the extreme coordinates."""
        layout = ScatterLayout(two_node_graph(), [[-1.0, 2.0], [3.0, -4.0]])
        bbox = layout.bounding_box
        assert bbox.lower_left == Point(-1.0, -4.0)
        assert bbox.upper_right == Point(3.0, 2.0)
        assert layout.bbox() is bbox

    def test_coordinate(self):
        """Coordinates are returned as points."""
        layout = ScatterLayout(two_node_graph(), [[0.0, 0.5], [1.0, 1.5]])
        assert layout.coordinate(1) == Point(1.0, 1.5)
        x, y = layout.coordinate(0)
        assert (x, y) == (0.0, 0.5)

    def test_coordinate_out_of_range(self):
        """Unknown nodes raise IndexError."""
        layout = ScatterLayout(two_node_graph(), [[0.0, 0.0], [1.0, 1.0]])
        with pytest.raises(IndexError):
            layout.coordinate(2)
        with pytest.raises(IndexError):
            layout.coordinate(-1)

    def test_positions_are_frozen(self):
        """Positions cannot be changed after construction."""
        source = np.array([[0.0, 0.0], [1.0, 1.0]])
        layout = ScatterLayout(two_node_graph(), source)
        source[0, 0] = 99.0
        assert layout.coordinate(0) == Point(0.0, 0.0)
        with pytest.raises(ValueError):
            layout.positions[0, 0] = 5.0

    def test_graph_reference(self):
        """The layout keeps the graph it was built for."""
        graph = two_node_graph()
        assert ScatterLayout(graph, [[0.0, 0.0], [1.0, 1.0]]).graph is graph

    def test_edge_lengths(self):
        """Edge lengths follow the graph's edge order."""
        graph = EdgeListGraph(3, [(0, 1), (1, 2)])
        layout = ScatterLayout(graph, [[0.0, 0.0], [3.0, 4.0], [3.0, 0.0]])
        np.testing.assert_allclose(layout.edge_lengths(), [5.0, 4.0])

    def test_edge_lengths_from_iterator(self):
        """Graphs whose edges() returns an iterator are supported."""
        graph = IteratorEdgesGraph(3, [(0, 1), (1, 2)])
        layout = ScatterLayout(graph, [[0.0, 0.0], [3.0, 4.0], [3.0, 0.0]])
        np.testing.assert_allclose(layout.edge_lengths(), [5.0, 4.0])

    def test_edge_lengths_without_edges(self):
        """A graph without edges has no edge lengths."""
        layout = ScatterLayout(EdgeListGraph(2), [[0.0, 0.0], [1.0, 1.0]])
        assert layout.edge_lengths().shape == (0,)


class TestScatterLayoutTransform:
    """Rescaling into a target bounding box."""

    def test_identity(self):
        """Transforming into the own bounding box leaves coordinates unchanged."""
        rng = np.random.default_rng(0)
        positions = rng.uniform(-300, 300, size=(20, 2))
        layout = ScatterLayout(EdgeListGraph(20), positions)
        result = layout.transform(layout.bounding_box)
        np.testing.assert_allclose(result.positions, layout.positions)

    def test_into_viewport(self):
        """The result fills the target box exactly."""
        layout = ScatterLayout(two_node_graph(), [[-10.0, -5.0], [10.0, 5.0]])
        target = BoundingBox.from_size(800, 600)
        result = layout.transform(target)
        assert result.coordinate(0) == Point(0.0, 0.0)
        assert result.coordinate(1) == Point(800.0, 600.0)
        assert result.bounding_box == target

    def test_axes_scale_independently(self):
        """x and y are scaled by their own factors."""
        graph = EdgeListGraph(3)
        layout = ScatterLayout(graph, [[0.0, 0.0], [2.0, 1.0], [1.0, 0.5]])
        result = layout.transform(BoundingBox(Point(10.0, 10.0), Point(14.0, 20.0)))
        assert result.coordinate(2) == Point(12.0, 15.0)

    def test_returns_new_layout(self):
        """The original layout is unchanged."""
        layout = ScatterLayout(two_node_graph(), [[0.0, 0.0], [1.0, 1.0]])
        result = layout.transform(BoundingBox.from_size(10, 10))
        assert result is not layout
        assert layout.coordinate(1) == Point(1.0, 1.0)

    def test_single_node_degenerate(self):
        """A single point cannot be rescaled."""
        layout = ScatterLayout(EdgeListGraph(1), [[3.0, 4.0]])
        assert layout.bounding_box.area == 0
        with pytest.raises(DegenerateBoundingBoxError):
            layout.transform(BoundingBox.from_size(100, 100))

    def test_collinear_degenerate(self):
        """Nodes sharing a y coordinate have zero height."""
        layout = ScatterLayout(two_node_graph(), [[0.0, 1.0], [5.0, 1.0]])
        with pytest.raises(DegenerateBoundingBoxError):
            layout.transform(BoundingBox.from_size(100, 100))


class TestScatterLayoutSequence:
    """Sequences of frames sharing one graph."""

    def make_sequence(self):
        frames = [
            [[0.0, 0.0], [1.0, 1.0]],
            [[2.0, 2.0], [3.0, 3.0]],
        ]
        return ScatterLayoutSequence(two_node_graph(), frames)

    def test_frame_count(self):
        """Frames are counted."""
        sequence = self.make_sequence()
        assert sequence.frame_count == 2
        assert len(sequence) == 2
        assert sequence.positions.shape == (2, 2, 2)

    def test_joint_bounding_box(self):
        """The box covers every frame."""
        bbox = self.make_sequence().bounding_box
        assert bbox.lower_left == Point(0.0, 0.0)
        assert bbox.upper_right == Point(3.0, 3.0)

    def test_frame_access(self):
        """Frames are ScatterLayouts with their own bounding boxes."""
        sequence = self.make_sequence()
        frame = sequence.frame(1)
        assert isinstance(frame, ScatterLayout)
        assert frame.bounding_box.lower_left == Point(2.0, 2.0)
        assert sequence[0].coordinate(1) == Point(1.0, 1.0)
        assert sequence.last_frame.coordinate(0) == Point(2.0, 2.0)
        assert sequence.first_frame.coordinate(0) == Point(0.0, 0.0)
        assert sequence.frame(-1).coordinate(1) == Point(3.0, 3.0)

    def test_frame_out_of_range(self):
        """Unknown frames raise IndexError."""
        sequence = self.make_sequence()
        with pytest.raises(IndexError):
            sequence.frame(2)
        with pytest.raises(IndexError):
            sequence.coordinate(-3, 0)
        with pytest.raises(IndexError):
            sequence.coordinate(0, 2)

    def test_coordinate(self):
        """Coordinates are addressed by frame and node."""
        assert self.make_sequence().coordinate(1, 0) == Point(2.0, 2.0)

    def test_iteration(self):
        """Iterating yields frames in order."""
        frames = list(self.make_sequence())
        assert [f.coordinate(0) for f in frames] == [Point(0.0, 0.0), Point(2.0, 2.0)]

    def test_transform_uses_joint_box(self):
        """Relative motion between frames is preserved."""
        sequence = self.make_sequence()
        result = sequence.transform(BoundingBox.from_size(30, 30))
        np.testing.assert_allclose(result.frame(0).positions, [[0.0, 0.0], [10.0, 10.0]])
        np.testing.assert_allclose(result.frame(1).positions, [[20.0, 20.0], [30.0, 30.0]])
        assert result.frame_count == 2

    def test_transform_identity(self):
        """Transforming into the joint box leaves frames unchanged."""
        sequence = self.make_sequence()
        result = sequence.transform(sequence.bounding_box)
        np.testing.assert_allclose(result.positions, sequence.positions)

    def test_static_single_node_degenerate(self):
        """A node that never moves cannot be rescaled."""
        sequence = ScatterLayoutSequence(EdgeListGraph(1), [[[1.0, 1.0]], [[1.0, 1.0]]])
        with pytest.raises(DegenerateBoundingBoxError):
            sequence.transform(BoundingBox.from_size(10, 10))

    def test_empty_sequence(self):
        """At least one frame is required."""
        with pytest.raises(EmptySequenceError):
            ScatterLayoutSequence(two_node_graph(), [])

    def test_frame_shape_mismatch(self):
        """Every frame must match the node count."""
        with pytest.raises(ShapeMismatchError):
            ScatterLayoutSequence(
                two_node_graph(),
                [[[0.0, 0.0], [1.0, 1.0]], [[0.0, 0.0]]],
            )

    def test_nan_in_any_frame(self):
        """NaN in a later frame is still rejected."""
        with pytest.raises(NonFiniteCoordinateError):
            ScatterLayoutSequence(
                two_node_graph(),
                [[[0.0, 0.0], [1.0, 1.0]], [[0.0, np.nan], [1.0, 1.0]]],
            )

    def test_inf_in_any_frame(self):
        """Infinite coordinates in any frame are rejected."""
        with pytest.raises(InfiniteBoundingBoxError):
            ScatterLayoutSequence(
                two_node_graph(),
                [[[0.0, 0.0], [1.0, 1.0]], [[0.0, -np.inf], [1.0, 1.0]]],
            )

    def test_positions_are_frozen(self):
        """Sequence positions are read-only."""
        sequence = self.make_sequence()
        with pytest.raises(ValueError):
            sequence.positions[0, 0, 0] = 1.0
