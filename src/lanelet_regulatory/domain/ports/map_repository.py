"""Map repository port."""

from pathlib import Path
from typing import Protocol

from lanelet_regulatory.domain.lanelet_map import LaneletMap, MapLoadResult


class MapRepository(Protocol):
    """Port for loading and saving lanelet maps."""

    def load(self, path: str | Path) -> MapLoadResult:
        """Load a map from a file, reconstructing its regulatory elements."""
        ...

    def save(self, lanelet_map: LaneletMap, path: str | Path) -> None:
        """Write a map to a file."""
        ...
