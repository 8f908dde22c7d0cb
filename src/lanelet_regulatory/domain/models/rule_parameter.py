"""Rule parameter domain model.

A rule parameter is a tagged variant over the primitives a regulatory element
can reference. The tag is explicit so readers can filter a parameter list by
kind without inspecting the wrapped value.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from lanelet_regulatory.domain.models.line_string import LineString3d
from lanelet_regulatory.domain.models.point import Point3d
from lanelet_regulatory.domain.models.polygon import Polygon3d

Primitive: TypeAlias = Point3d | LineString3d | Polygon3d


class RuleParameterKind(Enum):
    """Discriminant of a rule parameter."""

    POINT = "point"
    LINE_STRING = "line_string"
    POLYGON = "polygon"


_KIND_BY_TYPE: dict[type, RuleParameterKind] = {
    Point3d: RuleParameterKind.POINT,
    LineString3d: RuleParameterKind.LINE_STRING,
    Polygon3d: RuleParameterKind.POLYGON,
}


@dataclass(frozen=True)
class RuleParameter:
    """A primitive referenced by a regulatory element, tagged with its kind."""

    kind: RuleParameterKind
    value: Primitive

    def __post_init__(self) -> None:
        expected = _KIND_BY_TYPE.get(type(self.value))
        if expected is not self.kind:
            raise TypeError(
                f"Rule parameter of kind {self.kind.name} cannot hold {type(self.value).__name__}"
            )

    @classmethod
    def of(cls, primitive: Primitive) -> "RuleParameter":
        """Wrap a primitive, deriving the tag from its type."""
        kind = _KIND_BY_TYPE.get(type(primitive))
        if kind is None:
            raise TypeError(f"Unsupported rule parameter type: {type(primitive).__name__}")
        return cls(kind=kind, value=primitive)

    def as_point(self) -> Point3d | None:
        return self.value if isinstance(self.value, Point3d) else None

    def as_line_string(self) -> LineString3d | None:
        return self.value if isinstance(self.value, LineString3d) else None

    def as_polygon(self) -> Polygon3d | None:
        return self.value if isinstance(self.value, Polygon3d) else None


RuleParameters: TypeAlias = list[RuleParameter]
RuleParameterMap: TypeAlias = dict[str, RuleParameters]


def filter_parameters(
    parameters: Iterable[RuleParameter], kind: RuleParameterKind
) -> list[Primitive]:
    """Return the values of all parameters tagged with ``kind``, in order."""
    return [parameter.value for parameter in parameters if parameter.kind is kind]


def to_rule_parameters(primitives: Iterable[Primitive]) -> RuleParameters:
    """Wrap each primitive into a rule parameter."""
    return [RuleParameter.of(primitive) for primitive in primitives]
