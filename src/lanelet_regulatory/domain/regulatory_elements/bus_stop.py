"""Bus stop regulatory element."""

import logging
from collections.abc import Mapping, Sequence
from typing import ClassVar

from lanelet_regulatory.domain.errors import InvalidInputError
from lanelet_regulatory.domain.models import (
    AttributeName,
    AttributeValue,
    LineString3d,
    Polygon3d,
    RegulatoryElementData,
    RoleName,
    RuleParameter,
    RuleParameterKind,
    to_rule_parameters,
)
from lanelet_regulatory.domain.regulatory_elements.regulatory_element import RegulatoryElement

logger = logging.getLogger(__name__)


def _construct_bus_stop_data(
    element_id: int,
    attributes: Mapping[str, str],
    bus_stops: Sequence[Polygon3d],
    stop_line: LineString3d,
) -> RegulatoryElementData:
    data = RegulatoryElementData(
        id=element_id,
        parameters={
            RoleName.REFERS.value: to_rule_parameters(bus_stops),
            RoleName.REF_LINE.value: [RuleParameter.of(stop_line)],
        },
        attributes=dict(attributes),
    )
    data.attributes[AttributeName.TYPE.value] = AttributeValue.REGULATORY_ELEMENT.value
    data.attributes[AttributeName.SUBTYPE.value] = BusStop.rule_name
    return data


class BusStop(RegulatoryElement):
    """Associates one or more bus stop areas with exactly one stop line.

    The bus stop areas are polygons under the ``refers`` role and the stop
    line is a line string under the ``ref_line`` role.

    Both invariants (at least one area, exactly one stop line) are checked
    when the element is built. The mutators do not re-check them: removing
    the last area or the stop line leaves the element in a state that
    :meth:`validate` rejects, and :meth:`stop_line` raises ``IndexError``
    until a new stop line is set.
    """

    rule_name: ClassVar[str] = "bus_stop"

    def __init__(self, data: RegulatoryElementData) -> None:
        """Wrap existing data, e.g. reconstructed by a map loader.

        Raises:
            InvalidInputError: If there is no bus stop area or not exactly one stop line.
        """
        super().__init__(data)
        self.validate()

    @classmethod
    def make(
        cls,
        element_id: int,
        attributes: Mapping[str, str],
        bus_stops: Sequence[Polygon3d],
        stop_line: LineString3d,
    ) -> "BusStop":
        """Build a bus stop from its parameters.

        The type and subtype attributes are overwritten so the element is
        recognized as a bus stop when the map is saved and loaded again.
        """
        return cls(_construct_bus_stop_data(element_id, attributes, bus_stops, stop_line))

    def validate(self) -> None:
        """Check the structural invariants of the bus stop.

        Raises:
            InvalidInputError: If there is no bus stop area or not exactly one stop line.
        """
        if not self.bus_stops():
            raise InvalidInputError(f"No bus stop defined for regulatory element {self.id}!")
        stop_lines = self.get_parameters(RoleName.REF_LINE.value, RuleParameterKind.LINE_STRING)
        if len(stop_lines) != 1:
            raise InvalidInputError(
                f"There must be exactly one stop line defined for regulatory element "
                f"{self.id}, found {len(stop_lines)}!"
            )

    def bus_stops(self) -> list[Polygon3d]:
        """Return the bus stop areas, skipping non-polygon parameters."""
        polygons: list[Polygon3d] = []
        for parameter in self.parameters().get(RoleName.REFERS.value, []):
            polygon = parameter.as_polygon()
            if polygon is not None:
                polygons.append(polygon)
        return polygons

    def add_bus_stop(self, primitive: Polygon3d) -> None:
        """Append a bus stop area. Duplicates are allowed."""
        self.parameters().setdefault(RoleName.REFERS.value, []).append(RuleParameter.of(primitive))

    def remove_bus_stop(self, primitive: Polygon3d) -> bool:
        """Remove the first bus stop area equal to ``primitive``.

        Returns:
            True if the area existed and was removed.
        """
        params = self.parameters().get(RoleName.REFERS.value)
        if params is None:
            return False
        try:
            params.remove(RuleParameter.of(primitive))
        except ValueError:
            return False
        if not params:
            logger.debug(f"Bus stop {self.id} has no bus stop areas left")
        return True

    def stop_line(self) -> LineString3d:
        """Return the stop line.

        Raises:
            IndexError: If the stop line was removed and not set again.
        """
        for parameter in self.parameters().get(RoleName.REF_LINE.value, []):
            stop_line = parameter.as_line_string()
            if stop_line is not None:
                return stop_line
        raise IndexError(f"Bus stop {self.id} has no stop line")

    def has_stop_line(self) -> bool:
        return bool(self.get_parameters(RoleName.REF_LINE.value, RuleParameterKind.LINE_STRING))

    def set_stop_line(self, stop_line: LineString3d) -> None:
        """Replace the stop line."""
        self.parameters()[RoleName.REF_LINE.value] = [RuleParameter.of(stop_line)]

    def remove_stop_line(self) -> None:
        """Delete the stop line."""
        self.parameters()[RoleName.REF_LINE.value] = []
