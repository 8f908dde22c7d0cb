"""Application layer - use cases orchestrating the domain."""

from lanelet_regulatory.application.services import BusStopService

__all__ = ["BusStopService"]
