"""Test configuration and fixtures for capmesh."""
import pytest

from capmesh.domain.models import (
    Connection, ConnectionPath, Coordinate, MeshEdge, MeshNode, NodePortSegment
)
from capmesh.shared.configuration import config_manager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Point the global configuration at an empty temp location."""
    manager = config_manager.ConfigManager(tmp_path / "capmesh.json")
    config_manager._config_manager = manager
    yield manager
    config_manager._config_manager = None


def make_node(node_id, x=0.0, y=0.0, width=1.0, height=1.0):
    return MeshNode(node_id=node_id, center=Coordinate(x, y), width=width, height=height)


def make_segment(segment_id, node_id, start, end, connection_names, available_z=(0,)):
    return NodePortSegment(
        segment_id=segment_id,
        node_id=node_id,
        start=Coordinate(*start),
        end=Coordinate(*end),
        available_z=tuple(available_z),
        connection_names=tuple(connection_names),
    )


def make_connection_path(name, nodes):
    return ConnectionPath(connection=Connection(name=name), path=list(nodes))


@pytest.fixture
def path_graph():
    """Mesh n0 - n1 - n2 - n3 laid out along the x axis."""
    nodes = [make_node(f"n{i}", x=float(i)) for i in range(4)]
    edges = [
        MeshEdge(node_ids=("n0", "n1")),
        MeshEdge(node_ids=("n1", "n2")),
        MeshEdge(node_ids=("n2", "n3")),
    ]
    return nodes, edges


@pytest.fixture
def grid_graph():
    """5x5 grid mesh; node ids are "r{row}c{col}"."""
    nodes = []
    edges = []
    for row in range(5):
        for col in range(5):
            nodes.append(make_node(f"r{row}c{col}", x=float(col), y=float(row)))
            if col > 0:
                edges.append(MeshEdge(node_ids=(f"r{row}c{col - 1}", f"r{row}c{col}")))
            if row > 0:
                edges.append(MeshEdge(node_ids=(f"r{row - 1}c{col}", f"r{row}c{col}")))
    return nodes, edges


class StubSubSolver:
    """Sub-solver that finishes after a fixed number of steps."""

    def __init__(self, steps_to_finish=1, fail_with=None, **kwargs):
        self.init_kwargs = kwargs
        self.steps_to_finish = steps_to_finish
        self.fail_with = fail_with
        self.step_count = 0
        self.solved = False
        self.failed = False
        self.error = None

    def step(self):
        self.step_count += 1
        if self.step_count < self.steps_to_finish:
            return
        if self.fail_with is not None:
            self.failed = True
            self.error = self.fail_with
        else:
            self.solved = True


@pytest.fixture
def stub_factory():
    """Factory recording every stub sub-solver it builds."""
    created = []

    def factory(steps_to_finish=1, fail_with=None):
        def build(**kwargs):
            stub = StubSubSolver(steps_to_finish=steps_to_finish, fail_with=fail_with, **kwargs)
            created.append(stub)
            return stub
        return build

    factory.created = created
    return factory
