"""Adapters layer - configuration and map file persistence."""

from lanelet_regulatory.adapters.config import AppConfig
from lanelet_regulatory.adapters.osm import OsmMapRepository

__all__ = [
    "AppConfig",
    "OsmMapRepository",
]
