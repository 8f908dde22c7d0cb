"""Regulatory element base classes."""

from typing import ClassVar

from lanelet_regulatory.domain.models import (
    AttributeName,
    Primitive,
    RegulatoryElementData,
    RuleParameter,
    RuleParameterKind,
    RuleParameterMap,
    filter_parameters,
)


class RegulatoryElement:
    """Typed view over a :class:`RegulatoryElementData`.

    Subclasses set ``rule_name`` to the subtype they are registered under and
    expose typed accessors on top of the generic parameter map.
    """

    rule_name: ClassVar[str] = ""

    def __init__(self, data: RegulatoryElementData) -> None:
        self._data = data

    @property
    def id(self) -> int:
        return self._data.id

    @property
    def attributes(self) -> dict[str, str]:
        return self._data.attributes

    @property
    def data(self) -> RegulatoryElementData:
        """The underlying data, shared with whoever built this element."""
        return self._data

    def attribute(self, name: str, default: str | None = None) -> str | None:
        return self._data.attributes.get(name, default)

    @property
    def subtype(self) -> str | None:
        return self._data.attributes.get(AttributeName.SUBTYPE.value)

    def parameters(self) -> RuleParameterMap:
        """Return the live role -> parameters mapping."""
        return self._data.parameters

    def roles(self) -> list[str]:
        return list(self._data.parameters)

    def get_parameters(self, role: str, kind: RuleParameterKind) -> list[Primitive]:
        """Return all parameters of ``kind`` stored under ``role``.

        Missing roles yield an empty list.
        """
        return filter_parameters(self._data.parameters.get(role, []), kind)

    def primitives(self) -> list[Primitive]:
        """Return every referenced primitive across all roles."""
        return [
            parameter.value for params in self._data.parameters.values() for parameter in params
        ]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, roles={self.roles()})"


class GenericRegulatoryElement(RegulatoryElement):
    """Regulatory element with no type-specific structure.

    Used for subtypes that have no registered class.
    """

    rule_name: ClassVar[str] = "regulatory_element"

    def add_parameter(self, role: str, primitive: Primitive) -> None:
        self._data.parameters.setdefault(role, []).append(RuleParameter.of(primitive))

    def remove_parameter(self, role: str, primitive: Primitive) -> bool:
        """Remove the first parameter under ``role`` equal to ``primitive``."""
        params = self._data.parameters.get(role)
        if not params:
            return False
        target = RuleParameter.of(primitive)
        try:
            params.remove(target)
        except ValueError:
            return False
        return True
