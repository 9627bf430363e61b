"""Debug graphics snapshots produced by solvers."""
from .graphics import (
    GraphicsObject, GraphicsPoint, GraphicsLine, GraphicsRect, GraphicsCircle
)
from .section import visualize_section

__all__ = [
    'GraphicsObject', 'GraphicsPoint', 'GraphicsLine', 'GraphicsRect',
    'GraphicsCircle', 'visualize_section'
]
