"""Shared fixtures for map primitives."""

import pytest

from lanelet_regulatory.domain.models import LineString3d, Point3d, Polygon3d


def make_square(polygon_id: int, first_point_id: int, x: float, y: float) -> Polygon3d:
    """Create a 4x4 square polygon with its lower left corner at (x, y)."""
    corners = [(x, y), (x + 4.0, y), (x + 4.0, y + 4.0), (x, y + 4.0)]
    points = tuple(
        Point3d(id=first_point_id + i, x=cx, y=cy, z=0.0) for i, (cx, cy) in enumerate(corners)
    )
    return Polygon3d(id=polygon_id, points=points, attributes={"type": "bus_stop_area"})


def make_line(line_id: int, first_point_id: int, x: float) -> LineString3d:
    """Create a straight stop line crossing the lane at ``x``."""
    return LineString3d(
        id=line_id,
        points=(
            Point3d(id=first_point_id, x=x, y=-2.0, z=0.0),
            Point3d(id=first_point_id + 1, x=x, y=2.0, z=0.0),
        ),
        attributes={"type": "stop_line"},
    )


@pytest.fixture
def bus_stop_area() -> Polygon3d:
    """Bus stop area next to the lane."""
    return make_square(polygon_id=100, first_point_id=1, x=10.0, y=3.0)


@pytest.fixture
def second_bus_stop_area() -> Polygon3d:
    """Second bus stop area further down the lane."""
    return make_square(polygon_id=101, first_point_id=5, x=20.0, y=3.0)


@pytest.fixture
def stop_line() -> LineString3d:
    """Stop line in front of the bus stop areas."""
    return make_line(line_id=200, first_point_id=20, x=30.0)


@pytest.fixture
def other_stop_line() -> LineString3d:
    """Alternative stop line."""
    return make_line(line_id=201, first_point_id=22, x=35.0)
