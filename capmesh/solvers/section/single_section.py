"""Extract a bounded-hop section around a focus node and drive its sub-solver."""
import logging
from collections import deque
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Union

from ...domain.models import (
    ConnectionPath, MeshEdge, MeshNode, SectionTerminal, build_node_map
)
from ...shared.configuration import get_config
from ...shared.exceptions import ValidationError
from ...visualization.graphics import GraphicsObject
from ...visualization.section import visualize_section
from ..base_solver import BaseSolver
from ..mesh_utils import get_node_edge_map
from .hyperparameters import SectionHyperParameters
from .interfaces import SectionSubSolver, SectionSubSolverFactory
from .pathing import SectionPathingSolver

logger = logging.getLogger(__name__)


class SingleSectionSolver(BaseSolver):
    """Path the connections crossing one section of the mesh.

    The section is computed once, at construction:

    1. Breadth-first search from ``center_node_id`` over mesh edges, keeping
       every node within ``expansion_degrees`` hops.
    2. Section edges are the mesh edges with both endpoints in the section.
    3. Each connection path is trimmed to its first and last node inside the
       section; connections that never enter the section are dropped.

    Stepping only forwards to the sub-solver and mirrors its terminal state.
    """

    def __init__(self, center_node_id: str,
                 connections_with_nodes: Iterable[ConnectionPath],
                 nodes: Iterable[MeshNode],
                 edges: Iterable[MeshEdge],
                 color_map: Optional[Dict[str, str]] = None,
                 hyper_parameters: Union[SectionHyperParameters, Mapping[str, Any], None] = None,
                 sub_solver_factory: Optional[SectionSubSolverFactory] = None,
                 max_iterations: Optional[int] = None):
        """Initialize the solver and extract the section.

        Args:
            center_node_id: Focus node of the section
            connections_with_nodes: Global connection paths through the mesh
            nodes: Every mesh node
            edges: Every mesh edge
            color_map: Optional connection name to color mapping (cosmetic)
            hyper_parameters: Tunables, including the hop radius
            sub_solver_factory: Builds the solver that paths inside the
                section; defaults to SectionPathingSolver
            max_iterations: Optional driver cap override

        Raises:
            ValidationError: If the focus node is not a mesh node
        """
        super().__init__(max_iterations=max_iterations)
        if not isinstance(hyper_parameters, SectionHyperParameters):
            hyper_parameters = SectionHyperParameters.from_dict(hyper_parameters)

        self.center_node_id = center_node_id
        self.connections_with_nodes = list(connections_with_nodes)
        self.nodes = list(nodes)
        self.edges = list(edges)
        self.color_map = dict(color_map or {})
        self.hyper_parameters = hyper_parameters
        self.expansion_degrees = hyper_parameters.expansion_degrees
        self.node_map = build_node_map(self.nodes)
        self.node_edge_map = get_node_edge_map(self.edges, self.node_map)

        if center_node_id not in self.node_map:
            raise ValidationError(
                f"Center node {center_node_id} is not in the mesh",
                field='center_node_id', value=center_node_id
            )

        self.section_node_ids: Set[str] = set()
        self.section_nodes: List[MeshNode] = []
        self.section_edges: List[MeshEdge] = []
        self.section_connection_terminals: List[SectionTerminal] = []

        self._compute_section_nodes_terminals_and_edges()

        factory = sub_solver_factory or SectionPathingSolver
        self.active_sub_solver: SectionSubSolver = factory(
            section_connection_terminals=self.section_connection_terminals,
            section_nodes=self.section_nodes,
            section_edges=self.section_edges,
            color_map=self.color_map,
            hyper_parameters=self.hyper_parameters,
        )
        if not isinstance(self.active_sub_solver, SectionSubSolver):
            raise ValidationError(
                f"Sub-solver {type(self.active_sub_solver).__name__} does not expose "
                f"step/solved/failed/error",
                field='sub_solver_factory', value=factory
            )

        self.log.info(
            f"Section around {center_node_id} ({self.expansion_degrees} hops): "
            f"{len(self.section_nodes)} nodes, {len(self.section_edges)} edges, "
            f"{len(self.section_connection_terminals)} terminals"
        )

    def _compute_section_nodes_terminals_and_edges(self) -> None:
        # dict keeps discovery order for section_nodes
        discovered: Dict[str, None] = {self.center_node_id: None}
        queue = deque([(self.center_node_id, 0)])

        while queue:
            node_id, depth = queue.popleft()
            if depth >= self.expansion_degrees:
                continue

            for edge in self.node_edge_map.get(node_id, []):
                neighbor_id = edge.other(node_id)
                if neighbor_id not in discovered:
                    discovered[neighbor_id] = None
                    queue.append((neighbor_id, depth + 1))

        self.section_node_ids = set(discovered)
        self.section_nodes = [self.node_map[node_id] for node_id in discovered]

        self.section_edges = [
            edge for edge in self.edges
            if all(node_id in self.section_node_ids for node_id in edge.node_ids)
        ]

        self.section_connection_terminals = []
        for conn in self.connections_with_nodes:
            terminal = self._trim_to_section(conn)
            if terminal is not None:
                self.section_connection_terminals.append(terminal)

    def _trim_to_section(self, conn: ConnectionPath) -> Optional[SectionTerminal]:
        if not conn.path:
            return None

        node_ids = conn.node_ids
        start_node_id = next((n for n in node_ids if n in self.section_node_ids), None)
        if start_node_id is None:
            return None
        end_node_id = next(n for n in reversed(node_ids) if n in self.section_node_ids)

        return SectionTerminal(
            connection_name=conn.name,
            start_node_id=start_node_id,
            end_node_id=end_node_id,
        )

    @property
    def progress(self) -> float:
        if self.solved:
            return 1.0
        return getattr(self.active_sub_solver, 'progress', 0.0)

    def _step(self) -> None:
        self.active_sub_solver.step()
        if self.active_sub_solver.solved:
            self.solved = True
            return
        if self.active_sub_solver.failed:
            self.failed = True
            self.error = self.active_sub_solver.error
            self.log.warning(f"Sub-solver failed: {self.error}")

    def get_constructor_params(self) -> Dict[str, Any]:
        return {
            'center_node_id': self.center_node_id,
            'connections_with_nodes': [c.to_dict() for c in self.connections_with_nodes],
            'nodes': [n.to_dict() for n in self.nodes],
            'edges': [e.to_dict() for e in self.edges],
            'expansion_degrees': self.expansion_degrees,
        }

    def visualize(self) -> GraphicsObject:
        return visualize_section(
            section_nodes=self.section_nodes,
            section_edges=self.section_edges,
            section_connection_terminals=self.section_connection_terminals,
            node_map=self.node_map,
            color_map=self.color_map,
            center_node_id=self.center_node_id,
            node_opacity=get_config().settings.visualization.node_opacity,
            title=f"Section Solver (Center: {self.center_node_id}, Hops: {self.expansion_degrees})",
        )
