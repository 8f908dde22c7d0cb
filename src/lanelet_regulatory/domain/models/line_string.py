"""Line string domain model."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from lanelet_regulatory.domain.models.point import Point3d


@dataclass(frozen=True)
class LineString3d:
    """An ordered sequence of 3D points, e.g. a stop line."""

    id: int
    points: tuple[Point3d, ...]
    attributes: dict[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        # Accept any iterable of points but store an immutable tuple
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point3d]:
        return iter(self.points)
