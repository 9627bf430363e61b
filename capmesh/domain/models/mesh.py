"""Domain models for the capacity mesh graph."""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ...shared.exceptions import ValidationError
from ...shared.utils.validation_utils import validate_coordinates, validate_identifier


@dataclass(frozen=True)
class Coordinate:
    """Value object representing a 2D coordinate in mm."""
    x: float
    y: float
    
    def distance_to(self, other: 'Coordinate') -> float:
        """Calculate Euclidean distance to another coordinate."""
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5
    
    def midpoint(self, other: 'Coordinate') -> 'Coordinate':
        return Coordinate((self.x + other.x) / 2, (self.y + other.y) / 2)
    
    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y}
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Coordinate':
        validate_coordinates(data['x'], data['y'])
        return cls(x=data['x'], y=data['y'])


@dataclass(frozen=True)
class MeshNode:
    """A routable region of the capacity mesh.
    
    Owned by the mesh construction stage; solvers only ever look nodes up
    by ``node_id``.
    """
    node_id: str
    center: Coordinate
    width: float
    height: float
    available_z: Tuple[int, ...] = (0,)
    
    def __post_init__(self):
        validate_identifier(self.node_id, 'node_id')
        object.__setattr__(self, 'available_z', tuple(self.available_z))
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'node_id': self.node_id,
            'center': self.center.to_dict(),
            'width': self.width,
            'height': self.height,
            'available_z': list(self.available_z),
        }
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'MeshNode':
        return cls(
            node_id=data['node_id'],
            center=Coordinate.from_dict(data['center']),
            width=data['width'],
            height=data['height'],
            available_z=tuple(data.get('available_z', (0,))),
        )


@dataclass(frozen=True)
class MeshEdge:
    """Unordered adjacency between two mesh nodes."""
    node_ids: Tuple[str, str]
    edge_id: Optional[str] = None
    
    def __post_init__(self):
        node_ids = tuple(self.node_ids)
        if len(node_ids) != 2:
            raise ValidationError(
                f"Mesh edge must join exactly two nodes, got {len(node_ids)}",
                field='node_ids', value=node_ids
            )
        if node_ids[0] == node_ids[1]:
            raise ValidationError(
                f"Mesh edge cannot join node {node_ids[0]} to itself",
                field='node_ids', value=node_ids
            )
        object.__setattr__(self, 'node_ids', node_ids)
    
    def other(self, node_id: str) -> str:
        """Return the endpoint opposite ``node_id``."""
        a, b = self.node_ids
        if node_id == a:
            return b
        if node_id == b:
            return a
        raise ValueError(f"Node {node_id} is not an endpoint of edge {self.node_ids}")
    
    def connects(self, node_a: str, node_b: str) -> bool:
        return {node_a, node_b} == set(self.node_ids)
    
    def to_dict(self) -> Dict[str, Any]:
        data = {'node_ids': list(self.node_ids)}
        if self.edge_id is not None:
            data['edge_id'] = self.edge_id
        return data
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'MeshEdge':
        return cls(node_ids=tuple(data['node_ids']), edge_id=data.get('edge_id'))


def build_node_map(nodes: Iterable[MeshNode]) -> Mapping[str, MeshNode]:
    """Build the read-only ``node_id -> MeshNode`` lookup shared by solvers."""
    return MappingProxyType({node.node_id: node for node in nodes})
