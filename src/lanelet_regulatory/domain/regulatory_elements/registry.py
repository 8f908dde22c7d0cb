"""Registry mapping regulatory element subtypes to factories."""

import logging
from typing import TYPE_CHECKING

from lanelet_regulatory.domain.errors import UnknownSubtypeError
from lanelet_regulatory.domain.regulatory_elements.bus_stop import BusStop
from lanelet_regulatory.domain.regulatory_elements.regulatory_element import (
    GenericRegulatoryElement,
    RegulatoryElement,
)

if TYPE_CHECKING:
    from lanelet_regulatory.domain.contracts import RegulatoryElementFactory
    from lanelet_regulatory.domain.models import RegulatoryElementData

logger = logging.getLogger(__name__)


class RegulatoryElementRegistry:
    """Creates regulatory elements of the right type from generic data.

    The registry starts empty; the host application populates it, usually
    through :func:`register_default_regulatory_elements`, before loading maps.
    """

    def __init__(self, fallback_to_generic: bool = True) -> None:
        """Initialize an empty registry.

        Args:
            fallback_to_generic: Create a GenericRegulatoryElement for unknown
                subtypes instead of raising UnknownSubtypeError.
        """
        self._factories: dict[str, "RegulatoryElementFactory"] = {}
        self._fallback_to_generic = fallback_to_generic

    @property
    def fallback_to_generic(self) -> bool:
        return self._fallback_to_generic

    def register(self, subtype: str, factory: "RegulatoryElementFactory") -> None:
        """Register ``factory`` for ``subtype``.

        Raises:
            ValueError: If the subtype is already registered.
        """
        if subtype in self._factories:
            raise ValueError(f"Regulatory element subtype '{subtype}' is already registered")
        self._factories[subtype] = factory
        logger.debug(f"Registered regulatory element subtype '{subtype}'")

    def is_registered(self, subtype: str) -> bool:
        return subtype in self._factories

    def subtypes(self) -> list[str]:
        return sorted(self._factories)

    def create(self, data: "RegulatoryElementData") -> RegulatoryElement:
        """Create the element registered for the subtype of ``data``.

        Raises:
            UnknownSubtypeError: If the subtype is unknown and fallback is disabled.
            InvalidInputError: If the registered factory rejects the data.
        """
        subtype = data.subtype
        factory = self._factories.get(subtype) if subtype is not None else None
        if factory is None:
            if not self._fallback_to_generic:
                raise UnknownSubtypeError(subtype)
            logger.debug(
                f"No factory for subtype '{subtype}' of regulatory element {data.id}, "
                "using generic regulatory element"
            )
            return GenericRegulatoryElement(data)
        return factory(data)


def register_default_regulatory_elements(registry: RegulatoryElementRegistry) -> None:
    """Register all regulatory element types shipped with this package."""
    registry.register(BusStop.rule_name, BusStop)


def create_default_registry(fallback_to_generic: bool = True) -> RegulatoryElementRegistry:
    """Create a registry with all shipped regulatory element types registered."""
    registry = RegulatoryElementRegistry(fallback_to_generic=fallback_to_generic)
    register_default_regulatory_elements(registry)
    return registry
