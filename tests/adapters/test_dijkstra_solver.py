"""Tests for the Dijkstra route solver adapter."""

import math

import pytest

from transit_router.adapters.graph import DijkstraRouteSolver
from transit_router.domain.errors import UnknownSourceError, UnreachableTargetError
from transit_router.domain.models import Vertex


class TestDijkstraRouteSolver:
    @pytest.fixture
    def solver(self):
        return DijkstraRouteSolver()

    def test_solve_returns_route(self, solver, example_graph):
        graph, v = example_graph

        result = solver.solve(graph, v["A"], v["D"])

        assert result.found
        assert result.vertex_ids == ("A", "C", "B", "D")
        assert result.total_cost == 3

    def test_solve_to_departure_itself(self, solver, example_graph):
        graph, v = example_graph

        result = solver.solve(graph, v["B"], v["B"])

        assert result.path == (v["B"],)
        assert result.total_cost == 0

    def test_solve_unreachable_raises(self, solver, example_graph):
        graph, v = example_graph

        with pytest.raises(UnreachableTargetError) as exc:
            solver.solve(graph, v["D"], v["A"])

        assert (exc.value.source_id, exc.value.target_id) == ("D", "A")

    def test_solve_unknown_departure_raises(self, solver, example_graph):
        graph, v = example_graph

        with pytest.raises(UnknownSourceError):
            solver.solve(graph, Vertex("Z"), v["A"])

    def test_solve_safe_returns_no_route(self, solver, example_graph):
        graph, v = example_graph

        unreachable = solver.solve_safe(graph, v["D"], v["A"])
        unknown = solver.solve_safe(graph, Vertex("Z"), v["A"])

        for result in (unreachable, unknown):
            assert not result.found
            assert math.isinf(result.total_cost)

    def test_solve_safe_returns_route(self, solver, example_graph):
        graph, v = example_graph

        assert solver.solve_safe(graph, v["A"], v["B"]).total_cost == 2

    def test_tree_covers_every_reachable_vertex(self, solver, example_graph):
        graph, v = example_graph

        tree = solver.tree(graph, v["C"])

        assert {x.id for x in tree.distances} == {"B", "C", "D"}
