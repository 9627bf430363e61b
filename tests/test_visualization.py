"""Tests for graphics snapshot records."""
from capmesh.visualization import (
    GraphicsCircle, GraphicsLine, GraphicsObject, GraphicsPoint, GraphicsRect
)


class TestGraphicsObject:

    def test_to_dict_uses_camel_case_and_drops_none(self):
        graphics = GraphicsObject(
            title="demo",
            points=[GraphicsPoint(x=1, y=2, label="p")],
            lines=[GraphicsLine(points=[(0, 0), (1, 1)], stroke_dash="5 5")],
            rects=[GraphicsRect(center=(0, 0), width=2, height=3)],
            circles=[GraphicsCircle(center=(1, 1), radius=0.5, fill="red")],
        )

        data = graphics.to_dict()

        assert data["coordinateSystem"] == "cartesian"
        assert data["title"] == "demo"
        assert data["points"] == [{"x": 1, "y": 2, "label": "p"}]
        assert data["lines"] == [{
            "points": [{"x": 0, "y": 0}, {"x": 1, "y": 1}],
            "strokeDash": "5 5",
        }]
        assert data["rects"] == [{"center": {"x": 0, "y": 0}, "width": 2, "height": 3}]
        assert data["circles"] == [{"center": {"x": 1, "y": 1}, "radius": 0.5, "fill": "red"}]

    def test_merge(self):
        a = GraphicsObject(title="a", points=[GraphicsPoint(0, 0)])
        b = GraphicsObject(title="b", lines=[GraphicsLine(points=[(0, 0), (1, 0)])])

        merged = a.merge(b)

        assert merged.title == "a"
        assert len(merged.points) == 1
        assert len(merged.lines) == 1
        assert a.lines == []
