"""Assign concrete crossing points to the connections on each node port segment."""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from ..domain.models import (
    AssignedPoint, MeshNode, NodePortSegment, NodeWithPortPoints, PortPoint,
    SegmentAssignment, build_node_map
)
from ..shared.configuration import get_config
from ..shared.exceptions import SolverNotSolvedError, ValidationError
from ..visualization.graphics import GraphicsLine, GraphicsObject, GraphicsPoint
from .base_solver import BaseSolver

logger = logging.getLogger(__name__)


class SegmentToPointSolver(BaseSolver):
    """Resolve every segment's connections into (x, y, z) points.

    Each step does exactly one of two things:

    - Phase A: every unsolved segment carrying a single connection gets the
      segment midpoint.
    - Phase B (only when Phase A found nothing): the unsolved segment with
      the fewest connections, first one wins on ties, gets its connections
      sorted by name and spaced at ``i/(n+1)`` along start to end.

    Every point uses the segment's first available layer. At least one
    segment is solved per step, so the solver finishes in at most
    ``len(segments)`` steps and its output is fully deterministic.
    """

    def __init__(self, segments: Iterable[NodePortSegment], nodes: Iterable[MeshNode],
                 color_map: Optional[Dict[str, str]] = None,
                 max_iterations: Optional[int] = None):
        """Initialize the solver.

        Args:
            segments: Segments to assign; consumed in the given order
            nodes: Owning mesh nodes, only used to annotate the result
            color_map: Optional connection name to color mapping (cosmetic)
            max_iterations: Optional driver cap override
        """
        super().__init__(max_iterations=max_iterations)
        self.unsolved_segments: List[NodePortSegment] = list(segments)
        self.solved_segments: List[SegmentAssignment] = []
        self.total_segments = len(self.unsolved_segments)
        self.color_map = dict(color_map or {})
        self.node_map = build_node_map(nodes)

        seen_ids = set()
        for segment in self.unsolved_segments:
            if segment.node_id not in self.node_map:
                raise ValidationError(
                    f"Segment {segment.segment_id} references unknown node {segment.node_id}",
                    field='node_id', value=segment.node_id
                )
            if segment.segment_id in seen_ids:
                raise ValidationError(
                    f"Duplicate segment id {segment.segment_id}",
                    field='segment_id', value=segment.segment_id
                )
            seen_ids.add(segment.segment_id)

        self.stats.update({'trivial_assignments': 0, 'fallback_assignments': 0})
        self.log.debug(f"Initialized with {self.total_segments} segments")

    @property
    def progress(self) -> float:
        if self.total_segments == 0:
            return 1.0 if self.solved else 0.0
        return len(self.solved_segments) / self.total_segments

    def _step(self) -> None:
        assigned = self._assign_single_connection_segments()

        if assigned == 0 and self.unsolved_segments:
            self._assign_fallback_segment()

        if not self.unsolved_segments:
            self.solved = True
            self.log.info(
                f"Assigned {len(self.solved_segments)} segments in {self.iterations} steps "
                f"({self.stats['trivial_assignments']} trivial, "
                f"{self.stats['fallback_assignments']} fallback)"
            )

    def _assign_single_connection_segments(self) -> int:
        """Phase A. Returns the number of segments solved."""
        remaining: List[NodePortSegment] = []
        assigned = 0
        for segment in self.unsolved_segments:
            if segment.connection_count != 1:
                remaining.append(segment)
                continue

            center = segment.start.midpoint(segment.end)
            point = AssignedPoint(
                connection_name=segment.connection_names[0],
                x=center.x,
                y=center.y,
                z=segment.available_z[0],
            )
            self.solved_segments.append(SegmentAssignment(segment=segment, points=(point,)))
            assigned += 1

        self.unsolved_segments = remaining
        self.stats['trivial_assignments'] += assigned
        if assigned:
            self.log.debug(f"Step {self.iterations}: assigned {assigned} single-connection segments")
        return assigned

    def _assign_fallback_segment(self) -> None:
        """Phase B. Solves exactly one segment."""
        index = min(
            range(len(self.unsolved_segments)),
            key=lambda i: self.unsolved_segments[i].connection_count
        )
        candidate = self.unsolved_segments.pop(index)

        sorted_connections = sorted(candidate.connection_names)
        n = len(sorted_connections)
        start = np.array([candidate.start.x, candidate.start.y], dtype=float)
        delta = np.array([candidate.end.x, candidate.end.y], dtype=float) - start
        fractions = np.arange(1, n + 1, dtype=float) / (n + 1)
        positions = start + np.outer(fractions, delta)

        z = candidate.available_z[0]
        points = tuple(
            AssignedPoint(connection_name=name, x=float(x), y=float(y), z=z)
            for name, (x, y) in zip(sorted_connections, positions)
        )
        self.solved_segments.append(SegmentAssignment(segment=candidate, points=points))
        self.stats['fallback_assignments'] += 1
        self.log.debug(
            f"Step {self.iterations}: fallback spacing on segment {candidate.segment_id} "
            f"for {n} connections"
        )

    def _require_solved(self) -> None:
        if not self.solved:
            raise SolverNotSolvedError(
                f"{type(self).__name__} not solved, can't give port points yet",
                solver_name=type(self).__name__
            )

    def get_assigned_port_points(self) -> List[NodeWithPortPoints]:
        """Group all assigned points by owning mesh node.

        Raises:
            SolverNotSolvedError: If called before the solver is solved
        """
        self._require_solved()

        by_node: Dict[str, NodeWithPortPoints] = {}
        for assignment in self.solved_segments:
            node_id = assignment.segment.node_id
            if node_id not in by_node:
                node = self.node_map[node_id]
                by_node[node_id] = NodeWithPortPoints(
                    node_id=node_id,
                    center=node.center,
                    width=node.width,
                    height=node.height,
                )
            by_node[node_id].port_points.extend(
                PortPoint(x=p.x, y=p.y, z=p.z, connection_name=p.connection_name)
                for p in assignment.points
            )
        return list(by_node.values())

    def get_segment_assignments(self) -> Dict[str, List[AssignedPoint]]:
        """Assigned points keyed by segment id.

        Raises:
            SolverNotSolvedError: If called before the solver is solved
        """
        self._require_solved()
        return {a.segment.segment_id: list(a.points) for a in self.solved_segments}

    def get_constructor_params(self) -> Dict[str, object]:
        segments = [a.segment for a in self.solved_segments] + self.unsolved_segments
        return {
            'segments': [s.to_dict() for s in segments],
            'nodes': [n.to_dict() for n in self.node_map.values()],
            'color_map': dict(self.color_map),
        }

    def visualize(self) -> GraphicsObject:
        viz = get_config().settings.visualization
        graphics = GraphicsObject(title="Segment to Point Solver")

        for segment in self.unsolved_segments:
            graphics.lines.append(GraphicsLine(
                points=[(segment.start.x, segment.start.y), (segment.end.x, segment.end.y)],
                step=4,
            ))

        node_connections: Dict[str, Dict[str, List[Tuple[float, float]]]] = {}
        for assignment in self.solved_segments:
            segment = assignment.segment
            graphics.lines.append(GraphicsLine(
                points=[(segment.start.x, segment.start.y), (segment.end.x, segment.end.y)],
                step=4,
            ))

            for point in assignment.points:
                offset = (point.x + point.z * viz.z_offset_scale,
                          point.y + point.z * viz.z_offset_scale)

                # Separate stacked layers visually
                if point.z != 0:
                    graphics.lines.append(GraphicsLine(
                        points=[(point.x, point.y), offset],
                        stroke_color=viz.marker_color,
                        stroke_dash=viz.dash_pattern,
                        step=4,
                    ))

                graphics.points.append(GraphicsPoint(
                    x=offset[0],
                    y=offset[1],
                    label="\n".join([
                        f"{segment.node_id}-{point.connection_name}",
                        f"z: {','.join(str(z) for z in segment.available_z)}",
                        f"segment: {segment.segment_id}",
                    ]),
                    color=self.color_map.get(point.connection_name),
                    step=4,
                ))

                node_connections.setdefault(segment.node_id, {}).setdefault(
                    point.connection_name, []
                ).append((point.x, point.y))

        for connections in node_connections.values():
            for connection_name, points in connections.items():
                if len(points) > 1:
                    graphics.lines.append(GraphicsLine(
                        points=points,
                        stroke_color=self.color_map.get(connection_name, viz.default_connection_color),
                        stroke_dash=viz.dash_pattern,
                        step=4,
                    ))

        return graphics
