"""Bus stop summary domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BusStopSummary:
    """Flat view of a bus stop for listing and reporting."""

    id: int
    bus_stop_ids: list[int]
    stop_line_id: int | None  # None when the stop line was removed
    attributes: dict[str, str]
