"""Domain contracts (protocols) shared between layers."""

from lanelet_regulatory.domain.contracts.regulatory_element_factory import (
    RegulatoryElementFactory,
)

__all__ = ["RegulatoryElementFactory"]
