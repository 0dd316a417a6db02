"""
Unit tests for the shared-edge relation.
"""

from quadcube.adjacency import AdjacencyGraph, shared_vertex_count, shares_edge
from quadcube.types import Quadrilateral

from conftest import square


class TestSharesEdge:
    """Exactly two coincident vertices make an edge."""

    def test_two_shared_vertices(self):
        a = square(0, 0)
        b = square(100, 0)
        assert shared_vertex_count(a, b) == 2
        assert shares_edge(a, b)

    def test_no_shared_vertices(self):
        assert not shares_edge(square(0, 0), square(500, 500))

    def test_single_shared_corner(self):
        a = square(0, 0)
        b = square(100, 100)
        assert shared_vertex_count(a, b) == 1
        assert not shares_edge(a, b)

    def test_identical_copy_is_not_an_edge(self):
        a = square(0, 0)
        b = square(0, 0)
        assert shared_vertex_count(a, b) == 4
        assert not shares_edge(a, b)
        assert not shares_edge(a, a)

    def test_three_shared_vertices(self):
        a = square(0, 0)
        b = Quadrilateral(((0, 0), (100, 0), (100, 100), (-50, 50)))
        assert shared_vertex_count(a, b) == 3
        assert not shares_edge(a, b)

    def test_symmetric(self, projected_cube):
        top, left, right = projected_cube
        pairs = [(top, left), (left, right), (top, right), (square(0, 0), top)]
        for a, b in pairs:
            assert shares_edge(a, b) == shares_edge(b, a)

    def test_float_tolerance(self):
        a = Quadrilateral(((0.0, 0.0), (1.5, 0.0), (1.5, 1.5), (0.0, 1.5)))
        b = Quadrilateral(((1.5 + 1e-9, 0.0), (3.0, 0.0), (3.0, 1.5), (1.5, 1.5 - 1e-9)))
        assert shares_edge(a, b)
        c = Quadrilateral(((1.5 + 1e-3, 0.0), (3.0, 0.0), (3.0, 1.5), (1.5, 1.5)))
        assert not shares_edge(a, c)
        assert shares_edge(a, c, tol=1e-2)

    def test_projected_cube_faces_pairwise(self, projected_cube):
        top, left, right = projected_cube
        assert shares_edge(top, left)
        assert shares_edge(top, right)
        assert shares_edge(left, right)


class TestAdjacencyGraph:

    def test_edges_and_neighbours(self, projected_cube):
        top, left, right = projected_cube
        graph = AdjacencyGraph.from_candidates([top, square(1000, 1000), left, right])
        assert list(graph.edges()) == [(0, 2), (0, 3), (2, 3)]
        assert graph.neighbours(0) == {2, 3}
        assert graph.neighbours(1) == set()
        assert graph.adjacent(2, 0)
        assert not graph.adjacent(0, 1)
        assert graph.degree() == [2, 0, 2, 2]

    def test_duplicates_are_not_adjacent(self):
        graph = AdjacencyGraph.from_candidates([square(0, 0), square(0, 0), square(0, 0)])
        assert list(graph.edges()) == []

    def test_empty(self):
        graph = AdjacencyGraph.from_candidates([])
        assert graph.size == 0
        assert list(graph.edges()) == []
