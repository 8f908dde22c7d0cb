"""In-memory lanelet map holding primitives and regulatory elements."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TypeVar

from lanelet_regulatory.domain.models import (
    LineString3d,
    LoadIssue,
    Point3d,
    Polygon3d,
    Primitive,
)
from lanelet_regulatory.domain.regulatory_elements import RegulatoryElement

logger = logging.getLogger(__name__)

ElementT = TypeVar("ElementT", bound=RegulatoryElement)


class LaneletMap:
    """Layers of map primitives and regulatory elements, each keyed by id.

    Regulatory elements are shared: the same element object can be added to
    several maps, and mutating it is visible through all of them.
    """

    def __init__(self) -> None:
        self.points: dict[int, Point3d] = {}
        self.line_strings: dict[int, LineString3d] = {}
        self.polygons: dict[int, Polygon3d] = {}
        self.regulatory_elements: dict[int, RegulatoryElement] = {}

    def add(self, item: Primitive | RegulatoryElement) -> None:
        """Add a primitive or regulatory element together with everything it references."""
        if isinstance(item, RegulatoryElement):
            self._add_regulatory_element(item)
        elif isinstance(item, Polygon3d):
            self.polygons[item.id] = item
            self._add_points(item.points)
        elif isinstance(item, LineString3d):
            self.line_strings[item.id] = item
            self._add_points(item.points)
        elif isinstance(item, Point3d):
            self.points[item.id] = item
        else:
            raise TypeError(f"Cannot add {type(item).__name__} to a lanelet map")

    def _add_regulatory_element(self, element: RegulatoryElement) -> None:
        existing = self.regulatory_elements.get(element.id)
        if existing is not None and existing is not element:
            logger.warning(f"Replacing regulatory element {element.id} in lanelet map")
        self.regulatory_elements[element.id] = element
        for primitive in element.primitives():
            self.add(primitive)

    def _add_points(self, points: tuple[Point3d, ...]) -> None:
        for point in points:
            self.points[point.id] = point

    def remove_regulatory_element(self, element_id: int) -> RegulatoryElement | None:
        """Remove a regulatory element; referenced primitives stay in the map."""
        return self.regulatory_elements.pop(element_id, None)

    def regulatory_elements_of_type(self, element_type: type[ElementT]) -> list[ElementT]:
        """Return all regulatory elements of ``element_type``, ordered by id."""
        return [
            element
            for _, element in sorted(self.regulatory_elements.items())
            if isinstance(element, element_type)
        ]

    def __iter__(self) -> Iterator[RegulatoryElement]:
        return iter(self.regulatory_elements.values())

    def __len__(self) -> int:
        return len(self.regulatory_elements)

    def __repr__(self) -> str:
        return (
            f"LaneletMap(points={len(self.points)}, line_strings={len(self.line_strings)}, "
            f"polygons={len(self.polygons)}, regulatory_elements={len(self.regulatory_elements)})"
        )


@dataclass(frozen=True)
class MapLoadResult:
    """A loaded map together with the issues found while loading it."""

    lanelet_map: LaneletMap
    issues: list[LoadIssue] = field(default_factory=list)
