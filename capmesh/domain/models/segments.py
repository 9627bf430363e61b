"""Domain models for node port segments and their assigned points."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple

from ...shared.exceptions import ValidationError
from ...shared.utils.validation_utils import validate_identifier
from .mesh import Coordinate


@dataclass(frozen=True)
class NodePortSegment:
    """A span of a mesh node boundary crossed by one or more connections."""
    segment_id: str
    node_id: str
    start: Coordinate
    end: Coordinate
    available_z: Tuple[int, ...]
    connection_names: Tuple[str, ...]
    
    def __post_init__(self):
        validate_identifier(self.segment_id, 'segment_id')
        validate_identifier(self.node_id, 'node_id')
        available_z = tuple(self.available_z)
        connection_names = tuple(self.connection_names)
        if not available_z:
            raise ValidationError(
                f"Segment {self.segment_id} has no available layers",
                field='available_z', value=available_z
            )
        if not connection_names:
            raise ValidationError(
                f"Segment {self.segment_id} has no connections",
                field='connection_names', value=connection_names
            )
        if len(set(connection_names)) != len(connection_names):
            raise ValidationError(
                f"Segment {self.segment_id} lists a connection more than once",
                field='connection_names', value=connection_names
            )
        object.__setattr__(self, 'available_z', available_z)
        object.__setattr__(self, 'connection_names', connection_names)
    
    @property
    def connection_count(self) -> int:
        return len(self.connection_names)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'segment_id': self.segment_id,
            'node_id': self.node_id,
            'start': self.start.to_dict(),
            'end': self.end.to_dict(),
            'available_z': list(self.available_z),
            'connection_names': list(self.connection_names),
        }
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'NodePortSegment':
        return cls(
            segment_id=data['segment_id'],
            node_id=data['node_id'],
            start=Coordinate.from_dict(data['start']),
            end=Coordinate.from_dict(data['end']),
            available_z=tuple(data['available_z']),
            connection_names=tuple(data['connection_names']),
        )


@dataclass(frozen=True)
class AssignedPoint:
    """Concrete crossing point for one connection on one segment."""
    connection_name: str
    x: float
    y: float
    z: int
    
    def to_dict(self) -> Dict[str, Any]:
        return {'connection_name': self.connection_name, 'x': self.x, 'y': self.y, 'z': self.z}


@dataclass(frozen=True)
class SegmentAssignment:
    """A segment together with the points assigned to its connections."""
    segment: NodePortSegment
    points: Tuple[AssignedPoint, ...]
    
    def __post_init__(self):
        points = tuple(self.points)
        if len(points) != self.segment.connection_count:
            raise ValidationError(
                f"Segment {self.segment.segment_id} needs {self.segment.connection_count} "
                f"points, got {len(points)}",
                field='points', value=points
            )
        for point in points:
            if point.z not in self.segment.available_z:
                raise ValidationError(
                    f"Layer {point.z} is not available on segment {self.segment.segment_id}",
                    field='z', value=point.z
                )
        object.__setattr__(self, 'points', points)


@dataclass(frozen=True)
class PortPoint:
    """Assigned point flattened into a node-level result."""
    x: float
    y: float
    z: int
    connection_name: str
    
    def to_dict(self) -> Dict[str, Any]:
        return {'x': self.x, 'y': self.y, 'z': self.z, 'connection_name': self.connection_name}


@dataclass
class NodeWithPortPoints:
    """All port points contributed by the segments of one mesh node."""
    node_id: str
    center: Coordinate
    width: float
    height: float
    port_points: List[PortPoint] = field(default_factory=list)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'node_id': self.node_id,
            'center': self.center.to_dict(),
            'width': self.width,
            'height': self.height,
            'port_points': [p.to_dict() for p in self.port_points],
        }
