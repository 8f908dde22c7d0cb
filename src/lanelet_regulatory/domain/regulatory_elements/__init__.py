"""Regulatory element types and their registry."""

from lanelet_regulatory.domain.regulatory_elements.bus_stop import BusStop
from lanelet_regulatory.domain.regulatory_elements.registry import (
    RegulatoryElementRegistry,
    create_default_registry,
    register_default_regulatory_elements,
)
from lanelet_regulatory.domain.regulatory_elements.regulatory_element import (
    GenericRegulatoryElement,
    RegulatoryElement,
)

__all__ = [
    "BusStop",
    "GenericRegulatoryElement",
    "RegulatoryElement",
    "RegulatoryElementRegistry",
    "create_default_registry",
    "register_default_regulatory_elements",
]
