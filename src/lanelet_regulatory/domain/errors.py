"""Domain errors."""


class LaneletError(Exception):
    """Base class for all errors raised by this package."""


class InvalidInputError(LaneletError, ValueError):
    """Raised when a regulatory element is built from data that violates its invariants."""


class UnknownSubtypeError(LaneletError, KeyError):
    """Raised when no factory is registered for a regulatory element subtype."""

    def __init__(self, subtype: str | None) -> None:
        super().__init__(subtype)
        self.subtype = subtype

    def __str__(self) -> str:
        return f"No regulatory element registered for subtype {self.subtype!r}"


class MapParseError(LaneletError):
    """Raised when a persisted map cannot be parsed."""
