"""Generic graphics snapshot records.

A snapshot is an observational artifact only; nothing reads it back.
"""
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Tuple

Point2D = Tuple[float, float]

_CAMEL_CASE = {
    'stroke_color': 'strokeColor',
    'stroke_dash': 'strokeDash',
    'coordinate_system': 'coordinateSystem',
}


def _compact(record) -> Dict[str, Any]:
    data = {}
    for f in fields(record):
        value = getattr(record, f.name)
        if value is None:
            continue
        if f.name in ('points', 'center'):
            value = _xy(value)
        data[_CAMEL_CASE.get(f.name, f.name)] = value
    return data


def _xy(value):
    if isinstance(value, list):
        return [{'x': x, 'y': y} for x, y in value]
    x, y = value
    return {'x': x, 'y': y}


@dataclass
class GraphicsPoint:
    x: float
    y: float
    label: Optional[str] = None
    color: Optional[str] = None
    step: Optional[int] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return _compact(self)


@dataclass
class GraphicsLine:
    points: List[Point2D]
    stroke_color: Optional[str] = None
    stroke_dash: Optional[str] = None
    step: Optional[int] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return _compact(self)


@dataclass
class GraphicsRect:
    center: Point2D
    width: float
    height: float
    fill: Optional[str] = None
    stroke: Optional[str] = None
    label: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return _compact(self)


@dataclass
class GraphicsCircle:
    center: Point2D
    radius: float
    fill: Optional[str] = None
    stroke: Optional[str] = None
    label: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return _compact(self)


@dataclass
class GraphicsObject:
    """Snapshot of a solver's internal state for debugging."""
    title: str = ""
    points: List[GraphicsPoint] = field(default_factory=list)
    lines: List[GraphicsLine] = field(default_factory=list)
    rects: List[GraphicsRect] = field(default_factory=list)
    circles: List[GraphicsCircle] = field(default_factory=list)
    coordinate_system: str = "cartesian"
    
    def merge(self, other: 'GraphicsObject') -> 'GraphicsObject':
        """Return a new snapshot holding the elements of both."""
        return GraphicsObject(
            title=self.title or other.title,
            points=self.points + other.points,
            lines=self.lines + other.lines,
            rects=self.rects + other.rects,
            circles=self.circles + other.circles,
            coordinate_system=self.coordinate_system,
        )
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'points': [p.to_dict() for p in self.points],
            'lines': [l.to_dict() for l in self.lines],
            'rects': [r.to_dict() for r in self.rects],
            'circles': [c.to_dict() for c in self.circles],
            'coordinateSystem': self.coordinate_system,
            'title': self.title,
        }
