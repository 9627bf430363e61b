"""Default section pathing sub-solver: hop-shortest paths inside a section."""
import logging
import random
from collections import deque
from typing import Dict, List, Optional

from ...domain.models import MeshEdge, MeshNode, SectionTerminal, build_node_map
from ...visualization.graphics import GraphicsLine, GraphicsObject
from ..base_solver import BaseSolver
from ..mesh_utils import get_node_edge_map
from .hyperparameters import SectionHyperParameters

logger = logging.getLogger(__name__)


class SectionPathingSolver(BaseSolver):
    """Route one section terminal per step by breadth-first search.
    
    Terminals are routed in section order, or in an order shuffled by
    ``hyper_parameters.shuffle_seed`` when one is set. Neighbours are visited
    in edge order, so a given seed always yields the same routing.
    No capacity is tracked; the solver fails on the first terminal pair
    that is disconnected inside the section.
    """
    
    def __init__(self, section_connection_terminals: List[SectionTerminal],
                 section_nodes: List[MeshNode],
                 section_edges: List[MeshEdge],
                 color_map: Optional[Dict[str, str]] = None,
                 hyper_parameters: Optional[SectionHyperParameters] = None,
                 max_iterations: Optional[int] = None):
        super().__init__(max_iterations=max_iterations)
        self.section_connection_terminals = list(section_connection_terminals)
        self.section_nodes = list(section_nodes)
        self.section_edges = list(section_edges)
        self.color_map = dict(color_map or {})
        self.hyper_parameters = hyper_parameters or SectionHyperParameters()
        self.node_map = build_node_map(self.section_nodes)
        self.node_edge_map = get_node_edge_map(self.section_edges, self.node_map)
        self.routing_order: List[SectionTerminal] = list(self.section_connection_terminals)
        if self.hyper_parameters.shuffle_seed is not None:
            random.Random(self.hyper_parameters.shuffle_seed).shuffle(self.routing_order)
        self.section_paths: Dict[str, List[str]] = {}
        self._next_terminal = 0
    
    @property
    def progress(self) -> float:
        total = len(self.routing_order)
        return 1.0 if total == 0 else self._next_terminal / total
    
    def _step(self) -> None:
        if self._next_terminal >= len(self.routing_order):
            self.solved = True
            return
        
        terminal = self.routing_order[self._next_terminal]
        path = self._find_path(terminal.start_node_id, terminal.end_node_id)
        if path is None:
            self.failed = True
            self.error = (
                f"No path found for {terminal.connection_name} "
                f"from {terminal.start_node_id} to {terminal.end_node_id}"
            )
            self.log.warning(self.error)
            return
        
        self.section_paths[terminal.connection_name] = path
        self._next_terminal += 1
        if self._next_terminal == len(self.routing_order):
            self.solved = True
    
    def _find_path(self, start_id: str, end_id: str) -> Optional[List[str]]:
        if start_id not in self.node_map or end_id not in self.node_map:
            return None
        
        parents: Dict[str, Optional[str]] = {start_id: None}
        queue = deque([start_id])
        while queue:
            node_id = queue.popleft()
            if node_id == end_id:
                path = []
                current: Optional[str] = node_id
                while current is not None:
                    path.append(current)
                    current = parents[current]
                return path[::-1]
            
            for edge in self.node_edge_map.get(node_id, []):
                neighbor = edge.other(node_id)
                if neighbor not in parents:
                    parents[neighbor] = node_id
                    queue.append(neighbor)
        return None
    
    def visualize(self) -> GraphicsObject:
        graphics = GraphicsObject(title="Section Pathing Solver")
        for connection_name, path in self.section_paths.items():
            graphics.lines.append(GraphicsLine(
                points=[(self.node_map[n].center.x, self.node_map[n].center.y) for n in path],
                stroke_color=self.color_map.get(connection_name),
            ))
        return graphics
