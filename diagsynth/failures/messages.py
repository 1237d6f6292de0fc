"""Low-level parser messages carried by parse failures."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SystemUnexpected:
    """Unexpected input reported by the parser machinery itself."""

    text: str


@dataclass(frozen=True, slots=True)
class Unexpected:
    text: str


@dataclass(frozen=True, slots=True)
class Expected:
    text: str


@dataclass(frozen=True, slots=True)
class Generic:
    """Free-form parser message."""

    text: str


type ParseMessage = SystemUnexpected | Unexpected | Expected | Generic


__all__ = [
    "Expected",
    "Generic",
    "ParseMessage",
    "SystemUnexpected",
    "Unexpected",
]
