"""Rendering helper for an extracted mesh section."""
from typing import Dict, List, Mapping, Optional

from ..domain.models import MeshEdge, MeshNode, SectionTerminal
from .graphics import GraphicsLine, GraphicsObject, GraphicsPoint, GraphicsRect

CENTER_NODE_FILL = 'rgba(0, 0, 255, 0.25)'
EDGE_COLOR = 'rgba(0, 0, 0, 0.1)'
DEFAULT_TERMINAL_COLOR = '#000'


def visualize_section(section_nodes: List[MeshNode],
                      section_edges: List[MeshEdge],
                      section_connection_terminals: List[SectionTerminal],
                      node_map: Mapping[str, MeshNode],
                      color_map: Optional[Dict[str, str]] = None,
                      center_node_id: Optional[str] = None,
                      node_opacity: float = 0.001,
                      title: str = "Section") -> GraphicsObject:
    """Draw section nodes, edges and terminal pairs.
    
    Args:
        section_nodes: Nodes inside the section
        section_edges: Edges with both endpoints inside the section
        section_connection_terminals: Trimmed start/end node per connection
        node_map: Lookup used to resolve terminal node ids to centers
        color_map: Optional connection name to color mapping
        center_node_id: Focus node, drawn highlighted
        node_opacity: Fill alpha for ordinary section nodes
        title: Snapshot title
        
    Returns:
        GraphicsObject snapshot
    """
    color_map = color_map or {}
    graphics = GraphicsObject(title=title)
    
    for node in section_nodes:
        is_center = node.node_id == center_node_id
        graphics.rects.append(GraphicsRect(
            center=(node.center.x, node.center.y),
            width=node.width,
            height=node.height,
            fill=CENTER_NODE_FILL if is_center else f'rgba(0, 0, 0, {node_opacity})',
            label=f"{node.node_id}{' (center)' if is_center else ''}",
        ))
    
    for edge in section_edges:
        node_a, node_b = (node_map[node_id] for node_id in edge.node_ids)
        graphics.lines.append(GraphicsLine(
            points=[(node_a.center.x, node_a.center.y), (node_b.center.x, node_b.center.y)],
            stroke_color=EDGE_COLOR,
        ))
    
    for terminal in section_connection_terminals:
        color = color_map.get(terminal.connection_name, DEFAULT_TERMINAL_COLOR)
        start = node_map[terminal.start_node_id].center
        end = node_map[terminal.end_node_id].center
        graphics.lines.append(GraphicsLine(
            points=[(start.x, start.y), (end.x, end.y)],
            stroke_color=color,
            stroke_dash="5 5",
        ))
        graphics.points.append(GraphicsPoint(
            x=start.x, y=start.y, color=color,
            label=f"{terminal.connection_name} start ({terminal.start_node_id})",
        ))
        graphics.points.append(GraphicsPoint(
            x=end.x, y=end.y, color=color,
            label=f"{terminal.connection_name} end ({terminal.end_node_id})",
        ))
    
    return graphics
