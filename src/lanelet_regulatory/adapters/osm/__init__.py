"""Lanelet2 OSM-XML map persistence."""

from lanelet_regulatory.adapters.osm.osm_map_repository import OsmMapRepository

__all__ = ["OsmMapRepository"]
