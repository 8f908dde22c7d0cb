"""Ports (interfaces) for the ports-and-adapters architecture."""

from lanelet_regulatory.domain.ports.map_repository import MapRepository

__all__ = ["MapRepository"]
