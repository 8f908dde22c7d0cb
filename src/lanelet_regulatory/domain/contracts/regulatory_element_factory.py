"""Protocol for regulatory element factories."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lanelet_regulatory.domain.models.regulatory_element_data import RegulatoryElementData
    from lanelet_regulatory.domain.regulatory_elements.regulatory_element import (
        RegulatoryElement,
    )


class RegulatoryElementFactory(Protocol):
    """Builds a typed regulatory element from generic data.

    Regulatory element classes satisfy this protocol through their constructor.
    """

    def __call__(self, data: "RegulatoryElementData") -> "RegulatoryElement":
        """Create the element.

        Args:
            data: The generic data read from a map.

        Returns:
            The typed regulatory element wrapping ``data``.

        Raises:
            InvalidInputError: If ``data`` violates the element's invariants.
        """
        ...
