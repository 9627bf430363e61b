"""Domain models for global connection paths and section terminals."""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from ...shared.utils.validation_utils import validate_identifier
from .mesh import MeshNode


@dataclass(frozen=True)
class Connection:
    """A named signal that must be routed."""
    name: str
    net_name: Optional[str] = None
    
    def __post_init__(self):
        validate_identifier(self.name, 'connection name')


@dataclass
class ConnectionPath:
    """One connection's route through the whole mesh.
    
    ``path`` is None when the upstream pathing stage could not route the
    connection.
    """
    connection: Connection
    path: Optional[List[MeshNode]] = None
    
    @property
    def name(self) -> str:
        return self.connection.name
    
    @property
    def node_ids(self) -> List[str]:
        return [node.node_id for node in self.path or []]
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'connection': {'name': self.connection.name, 'net_name': self.connection.net_name},
            'path': None if self.path is None else [node.to_dict() for node in self.path],
        }
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ConnectionPath':
        conn = data['connection']
        path = data.get('path')
        return cls(
            connection=Connection(name=conn['name'], net_name=conn.get('net_name')),
            path=None if path is None else [MeshNode.from_dict(n) for n in path],
        )


@dataclass(frozen=True)
class SectionTerminal:
    """Section-local entry and exit node of one connection."""
    connection_name: str
    start_node_id: str
    end_node_id: str
    
    def to_dict(self) -> Dict[str, str]:
        return {
            'connection_name': self.connection_name,
            'start_node_id': self.start_node_id,
            'end_node_id': self.end_node_id,
        }
