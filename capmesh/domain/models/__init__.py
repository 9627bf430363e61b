"""Domain models package."""
from .mesh import Coordinate, MeshNode, MeshEdge, build_node_map
from .segments import (
    NodePortSegment, AssignedPoint, SegmentAssignment, PortPoint, NodeWithPortPoints
)
from .connections import Connection, ConnectionPath, SectionTerminal

__all__ = [
    'Coordinate', 'MeshNode', 'MeshEdge', 'build_node_map',
    'NodePortSegment', 'AssignedPoint', 'SegmentAssignment', 'PortPoint',
    'NodeWithPortPoints',
    'Connection', 'ConnectionPath', 'SectionTerminal'
]
