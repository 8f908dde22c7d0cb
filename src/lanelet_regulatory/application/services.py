"""Application services (use cases) for bus stop regulatory elements."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from lanelet_regulatory.domain.errors import InvalidInputError
from lanelet_regulatory.domain.lanelet_map import LaneletMap, MapLoadResult
from lanelet_regulatory.domain.models import BusStopSummary, LoadIssue
from lanelet_regulatory.domain.regulatory_elements import BusStop

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from lanelet_regulatory.domain.ports import MapRepository


class BusStopService:
    """Service for loading maps and inspecting their bus stops."""

    def __init__(self, map_repository: "MapRepository") -> None:
        """Initialize with a map repository."""
        self._map_repository = map_repository

    def load_map(self, path: str | Path) -> MapLoadResult:
        """Load a map through the repository."""
        result = self._map_repository.load(path)
        bus_stop_count = len(result.lanelet_map.regulatory_elements_of_type(BusStop))
        logger.info(f"Map {path} contains {bus_stop_count} bus stop(s)")
        return result

    def list_bus_stops(self, lanelet_map: LaneletMap) -> list[BusStopSummary]:
        """Summarize every bus stop in the map, ordered by id."""
        summaries = []
        for bus_stop in lanelet_map.regulatory_elements_of_type(BusStop):
            # The stop line may have been removed after loading
            stop_line_id = bus_stop.stop_line().id if bus_stop.has_stop_line() else None
            summaries.append(
                BusStopSummary(
                    id=bus_stop.id,
                    bus_stop_ids=[polygon.id for polygon in bus_stop.bus_stops()],
                    stop_line_id=stop_line_id,
                    attributes=dict(bus_stop.attributes),
                )
            )
        return summaries

    def find_by_stop_line(self, lanelet_map: LaneletMap, line_id: int) -> list[BusStop]:
        """Return the bus stops whose stop line has id ``line_id``."""
        return [
            bus_stop
            for bus_stop in lanelet_map.regulatory_elements_of_type(BusStop)
            if bus_stop.has_stop_line() and bus_stop.stop_line().id == line_id
        ]

    def find_invalid_bus_stops(self, lanelet_map: LaneletMap) -> list[LoadIssue]:
        """Re-check the invariants of every bus stop in the map.

        Bus stops are only validated when built, so this finds those left
        without bus stop areas or without a stop line by later mutations.
        """
        issues = []
        for bus_stop in lanelet_map.regulatory_elements_of_type(BusStop):
            try:
                bus_stop.validate()
            except InvalidInputError as e:
                logger.debug(f"Bus stop {bus_stop.id} is invalid: {e}")
                issues.append(LoadIssue(element_id=bus_stop.id, reason=str(e)))
        return issues
