"""Polygon domain model."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from lanelet_regulatory.domain.models.point import Point3d


@dataclass(frozen=True)
class Polygon3d:
    """A closed ring of 3D points, e.g. a bus stop area.

    The closing edge from the last point back to the first is implicit,
    so the first point is not repeated at the end.
    """

    id: int
    points: tuple[Point3d, ...]
    attributes: dict[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point3d]:
        return iter(self.points)
