"""Domain models for Lanelet2 regulatory elements."""

from lanelet_regulatory.domain.models.bus_stop_summary import BusStopSummary
from lanelet_regulatory.domain.models.line_string import LineString3d
from lanelet_regulatory.domain.models.load_issue import LoadIssue
from lanelet_regulatory.domain.models.point import Point3d
from lanelet_regulatory.domain.models.polygon import Polygon3d
from lanelet_regulatory.domain.models.regulatory_element_data import (
    AttributeName,
    AttributeValue,
    RegulatoryElementData,
    RoleName,
)
from lanelet_regulatory.domain.models.rule_parameter import (
    Primitive,
    RuleParameter,
    RuleParameterKind,
    RuleParameterMap,
    RuleParameters,
    filter_parameters,
    to_rule_parameters,
)

__all__ = [
    "AttributeName",
    "AttributeValue",
    "BusStopSummary",
    "LineString3d",
    "LoadIssue",
    "Point3d",
    "Polygon3d",
    "Primitive",
    "RegulatoryElementData",
    "RoleName",
    "RuleParameter",
    "RuleParameterKind",
    "RuleParameterMap",
    "RuleParameters",
    "filter_parameters",
    "to_rule_parameters",
]
