"""Domain layer - regulatory elements, map primitives and the lanelet map."""

from lanelet_regulatory.domain.errors import (
    InvalidInputError,
    LaneletError,
    MapParseError,
    UnknownSubtypeError,
)
from lanelet_regulatory.domain.lanelet_map import LaneletMap, MapLoadResult
from lanelet_regulatory.domain.models import (
    LineString3d,
    Point3d,
    Polygon3d,
    RegulatoryElementData,
    RoleName,
    RuleParameter,
    RuleParameterKind,
)
from lanelet_regulatory.domain.ports import MapRepository
from lanelet_regulatory.domain.regulatory_elements import (
    BusStop,
    GenericRegulatoryElement,
    RegulatoryElement,
    RegulatoryElementRegistry,
    create_default_registry,
    register_default_regulatory_elements,
)

__all__ = [
    "BusStop",
    "GenericRegulatoryElement",
    "InvalidInputError",
    "LaneletError",
    "LaneletMap",
    "LineString3d",
    "MapLoadResult",
    "MapParseError",
    "MapRepository",
    "Point3d",
    "Polygon3d",
    "RegulatoryElement",
    "RegulatoryElementData",
    "RegulatoryElementRegistry",
    "RoleName",
    "RuleParameter",
    "RuleParameterKind",
    "UnknownSubtypeError",
    "create_default_registry",
    "register_default_regulatory_elements",
]
