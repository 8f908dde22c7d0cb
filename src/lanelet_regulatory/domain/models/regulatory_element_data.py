"""Generic regulatory element data."""

from dataclasses import dataclass, field
from enum import StrEnum

from lanelet_regulatory.domain.models.rule_parameter import RuleParameterMap


class RoleName(StrEnum):
    """Role names grouping the parameters of a regulatory element."""

    REFERS = "refers"
    RIGHT_OF_WAY = "right_of_way"
    REF_LINE = "ref_line"
    YIELD = "yield"
    CANCELS = "cancels"
    CANCEL_LINE = "cancel_line"


class AttributeName(StrEnum):
    """Reserved attribute names."""

    TYPE = "type"
    SUBTYPE = "subtype"


class AttributeValue(StrEnum):
    """Reserved attribute values."""

    REGULATORY_ELEMENT = "regulatory_element"


@dataclass
class RegulatoryElementData:
    """Id, attributes and role-grouped parameters of a regulatory element.

    This is the representation a map loader builds before it knows which
    concrete element type to create. The element wrapping it owns it and
    mutates it in place.
    """

    id: int
    parameters: RuleParameterMap = field(default_factory=dict)
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def subtype(self) -> str | None:
        return self.attributes.get(AttributeName.SUBTYPE.value)
