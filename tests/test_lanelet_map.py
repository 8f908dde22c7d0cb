"""Tests for the in-memory lanelet map."""

import pytest

from lanelet_regulatory.domain.lanelet_map import LaneletMap
from lanelet_regulatory.domain.models import LineString3d, Point3d, Polygon3d, RegulatoryElementData
from lanelet_regulatory.domain.regulatory_elements import BusStop, GenericRegulatoryElement


def test_adding_regulatory_element_adds_referenced_primitives(
    bus_stop_area: Polygon3d, stop_line: LineString3d
) -> None:
    """Given a bus stop, when adding it, then its areas, stop line and points are added too."""
    lanelet_map = LaneletMap()
    bus_stop = BusStop.make(1, {}, [bus_stop_area], stop_line)

    lanelet_map.add(bus_stop)

    assert lanelet_map.regulatory_elements == {1: bus_stop}
    assert lanelet_map.polygons == {bus_stop_area.id: bus_stop_area}
    assert lanelet_map.line_strings == {stop_line.id: stop_line}
    assert len(lanelet_map.points) == len(bus_stop_area) + len(stop_line)


def test_add_single_point() -> None:
    """Given a point, when adding it, then it is stored in the points layer."""
    lanelet_map = LaneletMap()
    point = Point3d(id=3, x=1.0, y=2.0)

    lanelet_map.add(point)

    assert lanelet_map.points == {3: point}


def test_add_rejects_unknown_types() -> None:
    """Given an unsupported object, when adding it, then TypeError is raised."""
    with pytest.raises(TypeError, match="Cannot add"):
        LaneletMap().add("bus stop")  # type: ignore[arg-type]


def test_elements_are_shared_between_maps(
    bus_stop_area: Polygon3d, second_bus_stop_area: Polygon3d, stop_line: LineString3d
) -> None:
    """Given a bus stop in two maps, when mutating it, then both maps see the change."""
    first_map, second_map = LaneletMap(), LaneletMap()
    bus_stop = BusStop.make(1, {}, [bus_stop_area], stop_line)
    first_map.add(bus_stop)
    second_map.add(bus_stop)

    bus_stop.add_bus_stop(second_bus_stop_area)

    assert second_map.regulatory_elements[1] is first_map.regulatory_elements[1]
    assert len(second_map.regulatory_elements[1].primitives()) == 3


def test_regulatory_elements_of_type_filters_and_sorts(
    bus_stop_area: Polygon3d, stop_line: LineString3d
) -> None:
    """Given mixed elements, when filtering by BusStop, then only bus stops are returned by id."""
    lanelet_map = LaneletMap()
    later = BusStop.make(5, {}, [bus_stop_area], stop_line)
    earlier = BusStop.make(2, {}, [bus_stop_area], stop_line)
    generic = GenericRegulatoryElement(RegulatoryElementData(id=3))
    for element in (later, generic, earlier):
        lanelet_map.add(element)

    assert lanelet_map.regulatory_elements_of_type(BusStop) == [earlier, later]
    assert len(lanelet_map) == 3


def test_remove_regulatory_element_keeps_primitives(
    bus_stop_area: Polygon3d, stop_line: LineString3d
) -> None:
    """Given a bus stop in a map, when removing it, then its primitives stay."""
    lanelet_map = LaneletMap()
    bus_stop = BusStop.make(1, {}, [bus_stop_area], stop_line)
    lanelet_map.add(bus_stop)

    assert lanelet_map.remove_regulatory_element(1) is bus_stop
    assert lanelet_map.remove_regulatory_element(1) is None
    assert bus_stop_area.id in lanelet_map.polygons
