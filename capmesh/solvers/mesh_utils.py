"""Adjacency helpers over mesh edges."""
import logging
from typing import Dict, Iterable, List, Mapping, Optional

from ..domain.models import MeshEdge

logger = logging.getLogger(__name__)


def get_node_edge_map(edges: Iterable[MeshEdge],
                      known_node_ids: Optional[Mapping] = None) -> Dict[str, List[MeshEdge]]:
    """Map each node id to the edges touching it, in edge order.
    
    Edges with an endpoint outside ``known_node_ids`` (when given) are
    skipped.
    """
    node_edge_map: Dict[str, List[MeshEdge]] = {}
    skipped = 0
    for edge in edges:
        if known_node_ids is not None and not all(n in known_node_ids for n in edge.node_ids):
            skipped += 1
            continue
        for node_id in edge.node_ids:
            node_edge_map.setdefault(node_id, []).append(edge)
    
    if skipped:
        logger.warning(f"Ignored {skipped} edge(s) referencing unknown nodes")
    return node_edge_map
