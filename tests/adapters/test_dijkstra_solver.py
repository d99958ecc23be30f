"""Tests for the DijkstraPathSolver adapter."""

import pytest

from subpath.adapters.graph import DijkstraPathSolver
from subpath.domain.errors import ConfigurationError, NoPathError, UnknownVertexError
from subpath.domain.models import PathEntry
from subpath.graph.dijkstra import INFINITY
from subpath.graph.load_graph import build_graph


class TestDijkstraPathSolver:
    """Test suite for DijkstraPathSolver."""

    @pytest.fixture(params=["dijkstra", "bfs"])
    def solver(self, request):
        return DijkstraPathSolver(strategy=request.param)

    @pytest.fixture
    def graph(self, chain_users):
        return build_graph(chain_users)

    def test_unknown_strategy_is_rejected(self):
        with pytest.raises(ConfigurationError) as excinfo:
            DijkstraPathSolver(strategy="astar")
        assert excinfo.value.setting_name == "solver.strategy"

    def test_solve_returns_intermediates(self, solver, graph):
        result = solver.solve(graph, "a@x.io", "c@x.io")

        assert result.intermediates == (PathEntry(email="b@x.io", created="2021"),)
        assert result.hops == 2
        assert not result.is_direct

    def test_solve_direct_edge(self, solver, graph):
        result = solver.solve(graph, "a@x.io", "b@x.io")

        assert result.is_direct
        assert result.hops == 1

    def test_solve_same_endpoint(self, solver, graph):
        result = solver.solve(graph, "b@x.io", "b@x.io")

        assert result.intermediates == ()
        assert result.hops == 0

    def test_solve_unknown_source_raises(self, solver, graph):
        with pytest.raises(UnknownVertexError) as excinfo:
            solver.solve(graph, "ghost@x.io", "c@x.io")
        assert excinfo.value.email == "ghost@x.io"

    def test_solve_unknown_target_raises(self, solver, graph):
        with pytest.raises(UnknownVertexError) as excinfo:
            solver.solve(graph, "a@x.io", "ghost@x.io")
        assert excinfo.value.email == "ghost@x.io"

    def test_solve_against_edge_direction_raises(self, solver, graph):
        with pytest.raises(NoPathError) as excinfo:
            solver.solve(graph, "c@x.io", "a@x.io")
        assert (excinfo.value.source, excinfo.value.target) == ("c@x.io", "a@x.io")

    def test_solve_safe_never_raises(self, solver, graph):
        assert solver.solve_safe(graph, "c@x.io", "a@x.io").hops == INFINITY
        assert solver.solve_safe(graph, "ghost@x.io", "a@x.io").intermediates == ()
        assert solver.solve_safe(graph, "a@x.io", "c@x.io").hops == 2
