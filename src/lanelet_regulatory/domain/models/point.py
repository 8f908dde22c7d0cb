"""Point domain model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point3d:
    """A 3D map point.

    Attributes are metadata only and are ignored by equality and hashing.
    """

    id: int
    x: float
    y: float
    z: float = 0.0
    attributes: dict[str, str] = field(default_factory=dict, compare=False)
