"""Tests for domain models."""

import pytest
from pydantic import ValidationError

from lanelet_regulatory.domain.models import (
    LineString3d,
    LoadIssue,
    Point3d,
    Polygon3d,
    RegulatoryElementData,
    RuleParameter,
    RuleParameterKind,
    filter_parameters,
    to_rule_parameters,
)


def test_point_creation() -> None:
    """Given point data, when creating a Point3d, then all fields are set correctly."""
    point = Point3d(id=1, x=1.5, y=-2.0, z=0.25, attributes={"name": "corner"})

    assert point.id == 1
    assert point.x == 1.5
    assert point.y == -2.0
    assert point.z == 0.25
    assert point.attributes == {"name": "corner"}


def test_point_z_defaults_to_zero() -> None:
    """Given no z coordinate, when creating a Point3d, then z is 0."""
    assert Point3d(id=1, x=0.0, y=0.0).z == 0.0


def test_primitive_equality_ignores_attributes() -> None:
    """Given two points differing only in attributes, when comparing, then they are equal."""
    first = Point3d(id=1, x=1.0, y=2.0, attributes={"a": "1"})
    second = Point3d(id=1, x=1.0, y=2.0, attributes={"a": "2"})

    assert first == second
    assert hash(first) == hash(second)


def test_primitive_equality_uses_id_and_geometry(bus_stop_area: Polygon3d) -> None:
    """Given polygons with the same points but different ids, when comparing, then they differ."""
    renamed = Polygon3d(id=bus_stop_area.id + 1, points=bus_stop_area.points)
    moved = Polygon3d(id=bus_stop_area.id, points=bus_stop_area.points[:-1])

    assert renamed != bus_stop_area
    assert moved != bus_stop_area
    assert Polygon3d(id=bus_stop_area.id, points=bus_stop_area.points) == bus_stop_area


def test_line_string_stores_points_as_tuple() -> None:
    """Given a list of points, when creating a LineString3d, then points are stored as a tuple."""
    points = [Point3d(id=1, x=0.0, y=0.0), Point3d(id=2, x=1.0, y=0.0)]
    line = LineString3d(id=10, points=points)  # type: ignore[arg-type]

    assert line.points == tuple(points)
    assert len(line) == 2
    assert list(line) == points


def test_primitives_are_immutable(stop_line: LineString3d) -> None:
    """Given a line string, when assigning a field, then an error is raised."""
    with pytest.raises(AttributeError):
        stop_line.id = 5  # type: ignore[misc]


class TestRuleParameter:
    """Tests for the tagged rule parameter variant."""

    def test_of_derives_kind_from_primitive(
        self, bus_stop_area: Polygon3d, stop_line: LineString3d
    ) -> None:
        """Given primitives, when wrapping them, then the tag matches the primitive type."""
        point = Point3d(id=1, x=0.0, y=0.0)

        assert RuleParameter.of(point).kind is RuleParameterKind.POINT
        assert RuleParameter.of(stop_line).kind is RuleParameterKind.LINE_STRING
        assert RuleParameter.of(bus_stop_area).kind is RuleParameterKind.POLYGON

    def test_of_rejects_unsupported_types(self) -> None:
        """Given a non-primitive, when wrapping it, then TypeError is raised."""
        with pytest.raises(TypeError, match="Unsupported rule parameter type"):
            RuleParameter.of("not a primitive")  # type: ignore[arg-type]

    def test_mismatched_kind_is_rejected(self, stop_line: LineString3d) -> None:
        """Given a line string tagged as polygon, when creating the parameter, then TypeError is raised."""
        with pytest.raises(TypeError, match="POLYGON"):
            RuleParameter(kind=RuleParameterKind.POLYGON, value=stop_line)

    def test_typed_accessors_filter_by_tag(
        self, bus_stop_area: Polygon3d, stop_line: LineString3d
    ) -> None:
        """Given a polygon parameter, when using typed accessors, then only as_polygon returns it."""
        parameter = RuleParameter.of(bus_stop_area)

        assert parameter.as_polygon() is bus_stop_area
        assert parameter.as_line_string() is None
        assert parameter.as_point() is None
        assert RuleParameter.of(stop_line).as_line_string() is stop_line

    def test_parameters_compare_by_value(self, bus_stop_area: Polygon3d) -> None:
        """Given two wrappers of equal polygons, when comparing, then they are equal."""
        copy = Polygon3d(id=bus_stop_area.id, points=bus_stop_area.points)

        assert RuleParameter.of(bus_stop_area) == RuleParameter.of(copy)


def test_filter_parameters_keeps_order_and_kind(
    bus_stop_area: Polygon3d, second_bus_stop_area: Polygon3d, stop_line: LineString3d
) -> None:
    """Given mixed parameters, when filtering by polygon, then polygons are returned in order."""
    parameters = to_rule_parameters([bus_stop_area, stop_line, second_bus_stop_area])

    assert filter_parameters(parameters, RuleParameterKind.POLYGON) == [
        bus_stop_area,
        second_bus_stop_area,
    ]
    assert filter_parameters(parameters, RuleParameterKind.LINE_STRING) == [stop_line]
    assert filter_parameters(parameters, RuleParameterKind.POINT) == []


def test_regulatory_element_data_defaults() -> None:
    """Given only an id, when creating RegulatoryElementData, then parameters and attributes are empty."""
    data = RegulatoryElementData(id=7)

    assert data.parameters == {}
    assert data.attributes == {}
    assert data.subtype is None


def test_regulatory_element_data_subtype() -> None:
    """Given a subtype attribute, when reading subtype, then it is returned."""
    data = RegulatoryElementData(id=7, attributes={"subtype": "bus_stop"})

    assert data.subtype == "bus_stop"


def test_load_issue_is_frozen() -> None:
    """Given a LoadIssue, when assigning a field, then validation error is raised."""
    issue = LoadIssue(element_id=3, reason="broken")

    with pytest.raises(ValidationError):
        issue.reason = "fixed"  # type: ignore[misc]
