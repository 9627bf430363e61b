"""Tests for SingleSectionSolver section extraction and sub-solver forwarding."""
import random

import pytest

from capmesh.domain.models import MeshEdge, SectionTerminal
from capmesh.shared.exceptions import SolverFailedError, ValidationError
from capmesh.solvers import (
    SectionHyperParameters, SectionPathingSolver, SingleSectionSolver, run_solver
)
from conftest import make_connection_path, make_node


def build(path_graph, center="n1", hops=1, connections=(), **kwargs):
    nodes, edges = path_graph
    return SingleSectionSolver(
        center_node_id=center,
        connections_with_nodes=list(connections),
        nodes=nodes,
        edges=edges,
        hyper_parameters={"EXPANSION_DEGREES": hops},
        **kwargs,
    )


class TestSectionNodes:

    def test_radius_containment(self, path_graph):
        solver = build(path_graph, hops=1)
        assert solver.section_node_ids == {"n0", "n1", "n2"}
        assert [n.node_id for n in solver.section_nodes] == ["n1", "n0", "n2"]

    def test_zero_hops_is_focus_only(self, path_graph):
        solver = build(path_graph, hops=0)
        assert solver.section_node_ids == {"n1"}
        assert solver.section_edges == []

    def test_default_radius_from_configuration(self, path_graph, isolated_config):
        nodes, edges = path_graph
        isolated_config.update_solver_settings(expansion_degrees=2)
        solver = SingleSectionSolver(
            center_node_id="n0", connections_with_nodes=[], nodes=nodes, edges=edges
        )
        assert solver.expansion_degrees == 2
        assert solver.section_node_ids == {"n0", "n1", "n2"}

    def test_hop_distance_on_grid(self, grid_graph):
        nodes, edges = grid_graph
        solver = SingleSectionSolver(
            center_node_id="r2c2", connections_with_nodes=[], nodes=nodes, edges=edges,
            hyper_parameters=SectionHyperParameters(expansion_degrees=2),
        )

        expected = {
            f"r{r}c{c}" for r in range(5) for c in range(5)
            if abs(r - 2) + abs(c - 2) <= 2
        }
        assert solver.section_node_ids == expected
        assert len(expected) == 13

    def test_unknown_center_rejected(self, path_graph):
        with pytest.raises(ValidationError):
            build(path_graph, center="nope")

    def test_isolated_center(self):
        nodes = [make_node("solo"), make_node("other", x=5)]
        solver = SingleSectionSolver(
            center_node_id="solo", connections_with_nodes=[], nodes=nodes, edges=[],
        )
        assert solver.section_node_ids == {"solo"}

    def test_edges_to_unknown_nodes_ignored(self, path_graph):
        nodes, edges = path_graph
        solver = SingleSectionSolver(
            center_node_id="n0",
            connections_with_nodes=[],
            nodes=nodes,
            edges=edges + [MeshEdge(node_ids=("n0", "ghost"))],
            hyper_parameters={"expansion_degrees": 1},
        )
        assert solver.section_node_ids == {"n0", "n1"}


class TestSectionEdges:

    def test_edge_closure(self, path_graph):
        solver = build(path_graph, hops=1)
        assert [e.node_ids for e in solver.section_edges] == [("n0", "n1"), ("n1", "n2")]

    def test_edges_are_mesh_edges_inside_section(self, grid_graph):
        nodes, edges = grid_graph
        solver = SingleSectionSolver(
            center_node_id="r0c0", connections_with_nodes=[], nodes=nodes, edges=edges,
            hyper_parameters={"expansion_degrees": 3},
        )
        for edge in solver.section_edges:
            assert edge in edges
            assert set(edge.node_ids) <= solver.section_node_ids
        inside = [e for e in edges if set(e.node_ids) <= solver.section_node_ids]
        assert solver.section_edges == inside


class TestTerminals:

    def test_path_trimmed_to_section(self, path_graph):
        nodes, _ = path_graph
        conn = make_connection_path("sig", nodes)
        solver = build(path_graph, hops=1, connections=[conn])

        assert solver.section_connection_terminals == [
            SectionTerminal(connection_name="sig", start_node_id="n0", end_node_id="n2")
        ]

    def test_reverse_path_trimmed(self, path_graph):
        nodes, _ = path_graph
        conn = make_connection_path("sig", list(reversed(nodes)))
        solver = build(path_graph, hops=1, connections=[conn])

        terminal = solver.section_connection_terminals[0]
        assert (terminal.start_node_id, terminal.end_node_id) == ("n2", "n0")

    def test_connection_outside_section_omitted(self, path_graph):
        nodes, _ = path_graph
        outside = make_connection_path("far", [nodes[3]])
        unrouted = make_connection_path("none", [])
        unrouted.path = None
        inside = make_connection_path("near", [nodes[1]])
        solver = build(path_graph, hops=1, connections=[outside, unrouted, inside])

        assert [t.connection_name for t in solver.section_connection_terminals] == ["near"]
        assert solver.section_connection_terminals[0].start_node_id == "n1"
        assert solver.section_connection_terminals[0].end_node_id == "n1"

    def test_terminals_are_section_members(self, grid_graph):
        nodes, edges = grid_graph
        node_map = {n.node_id: n for n in nodes}
        row = [node_map[f"r2c{c}"] for c in range(5)]
        column = [node_map[f"r{r}c0"] for r in range(5)]
        solver = SingleSectionSolver(
            center_node_id="r2c2",
            connections_with_nodes=[make_connection_path("row", row),
                                    make_connection_path("col", column)],
            nodes=nodes, edges=edges,
            hyper_parameters={"expansion_degrees": 1},
        )

        assert [t.connection_name for t in solver.section_connection_terminals] == ["row"]
        terminal = solver.section_connection_terminals[0]
        assert (terminal.start_node_id, terminal.end_node_id) == ("r2c1", "r2c3")


class TestSubSolverForwarding:

    def test_sub_solver_receives_section(self, path_graph, stub_factory):
        nodes, _ = path_graph
        solver = build(path_graph, hops=1, connections=[make_connection_path("sig", nodes)],
                       sub_solver_factory=stub_factory())

        stub = stub_factory.created[0]
        kwargs = stub.init_kwargs
        assert kwargs["section_nodes"] == solver.section_nodes
        assert kwargs["section_edges"] == solver.section_edges
        assert kwargs["section_connection_terminals"] == solver.section_connection_terminals
        assert kwargs["hyper_parameters"].expansion_degrees == 1

    def test_mirrors_solved(self, path_graph, stub_factory):
        solver = build(path_graph, sub_solver_factory=stub_factory(steps_to_finish=3))

        solver.step()
        solver.step()
        assert not solver.solved
        solver.step()
        assert solver.solved
        assert stub_factory.created[0].step_count == 3

    def test_mirrors_failure_verbatim(self, path_graph, stub_factory):
        solver = build(path_graph, sub_solver_factory=stub_factory(fail_with="boom: no room"))

        solver.step()

        assert solver.failed
        assert not solver.solved
        assert solver.error == "boom: no room"
        solver.step()
        assert stub_factory.created[0].step_count == 1

    def test_driver_surfaces_failure(self, path_graph, stub_factory):
        solver = build(path_graph, sub_solver_factory=stub_factory(fail_with="congested"))

        with pytest.raises(SolverFailedError) as exc_info:
            run_solver(solver)
        assert "congested" in str(exc_info.value)

    def test_factory_must_return_steppable(self, path_graph):
        with pytest.raises(ValidationError):
            build(path_graph, sub_solver_factory=lambda **kwargs: object())


class TestDefaultPathingSolver:

    def test_routes_terminals_through_section(self, grid_graph):
        nodes, edges = grid_graph
        node_map = {n.node_id: n for n in nodes}
        row = [node_map[f"r2c{c}"] for c in range(5)]
        solver = SingleSectionSolver(
            center_node_id="r2c2",
            connections_with_nodes=[make_connection_path("row", row)],
            nodes=nodes, edges=edges,
            hyper_parameters={"expansion_degrees": 1},
        )

        run_solver(solver)

        assert solver.solved
        assert isinstance(solver.active_sub_solver, SectionPathingSolver)
        assert solver.active_sub_solver.section_paths == {"row": ["r2c1", "r2c2", "r2c3"]}

    def test_disconnected_terminals_fail(self):
        nodes = [make_node("a"), make_node("b", x=1)]
        solver = SectionPathingSolver(
            section_connection_terminals=[SectionTerminal("sig", "a", "b")],
            section_nodes=nodes,
            section_edges=[],
        )

        solver.step()

        assert solver.failed
        assert solver.error == "No path found for sig from a to b"

    def test_no_terminals_solves(self):
        solver = SectionPathingSolver(
            section_connection_terminals=[], section_nodes=[make_node("a")], section_edges=[]
        )
        solver.step()
        assert solver.solved

    def _fan_out(self, **kwargs):
        nodes = [make_node(f"n{i}", x=i) for i in range(6)]
        edges = [MeshEdge(node_ids=(f"n{i}", f"n{i + 1}")) for i in range(5)]
        terminals = [SectionTerminal(f"c{i}", "n0", f"n{i + 1}") for i in range(5)]
        solver = SectionPathingSolver(
            section_connection_terminals=terminals, section_nodes=nodes,
            section_edges=edges, **kwargs
        )
        return solver, terminals

    def test_routes_in_section_order_without_seed(self):
        solver, terminals = self._fan_out()
        run_solver(solver)
        assert list(solver.section_paths) == [t.connection_name for t in terminals]

    def test_seed_sets_routing_order(self):
        solver, terminals = self._fan_out(
            hyper_parameters=SectionHyperParameters(shuffle_seed=7)
        )
        expected = list(terminals)
        random.Random(7).shuffle(expected)

        run_solver(solver)

        assert solver.routing_order == expected
        assert list(solver.section_paths) == [t.connection_name for t in expected]
        assert solver.section_paths["c2"] == ["n0", "n1", "n2", "n3"]

    def test_different_seeds_change_routing_order(self):
        orders = set()
        for seed in range(20):
            solver, _ = self._fan_out(hyper_parameters=SectionHyperParameters(shuffle_seed=seed))
            run_solver(solver)
            orders.add(tuple(solver.section_paths))
        assert len(orders) > 1

    def test_seed_forwarded_from_configuration(self, path_graph, isolated_config):
        nodes, edges = path_graph
        isolated_config.update_solver_settings(shuffle_seed=3)
        solver = SingleSectionSolver(
            center_node_id="n1", connections_with_nodes=[], nodes=nodes, edges=edges,
        )
        assert solver.hyper_parameters.shuffle_seed == 3
        assert solver.active_sub_solver.hyper_parameters.shuffle_seed == 3

    def test_negative_seed_rejected(self):
        with pytest.raises(ValidationError):
            SectionHyperParameters(shuffle_seed=-1)


class TestIntrospection:

    def test_constructor_params(self, path_graph):
        nodes, _ = path_graph
        solver = build(path_graph, hops=2, connections=[make_connection_path("sig", nodes)])

        params = solver.get_constructor_params()

        assert params["center_node_id"] == "n1"
        assert params["expansion_degrees"] == 2
        assert [n["node_id"] for n in params["nodes"]] == ["n0", "n1", "n2", "n3"]
        assert params["edges"][0] == {"node_ids": ["n0", "n1"]}
        assert params["connections_with_nodes"][0]["connection"]["name"] == "sig"

    def test_visualize(self, path_graph):
        nodes, _ = path_graph
        solver = build(path_graph, hops=1, connections=[make_connection_path("sig", nodes)],
                       color_map={"sig": "blue"})

        graphics = solver.visualize()

        assert graphics.title == "Section Solver (Center: n1, Hops: 1)"
        assert len(graphics.rects) == 3
        center_rect = next(r for r in graphics.rects if "(center)" in r.label)
        assert center_rect.center == (1.0, 0.0)
        # two section edges plus one terminal line
        assert len(graphics.lines) == 3
        assert graphics.lines[-1].stroke_color == "blue"
        assert len(graphics.points) == 2
