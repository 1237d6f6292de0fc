"""Structured syntax-stage failures, one variant per detectable error kind.

Values are built by upstream detection passes and rendered by
`diagsynth.report.synthesize`. Variants carry facts, never message text.
"""

from __future__ import annotations

from dataclasses import dataclass

from diagsynth.failures.messages import ParseMessage
from diagsynth.types import TypeExpr

type Constructor = tuple[str, tuple[TypeExpr, ...]]


@dataclass(frozen=True, slots=True)
class ParseFailure:
    messages: tuple[ParseMessage, ...]


@dataclass(frozen=True, slots=True)
class InfixRedeclared:
    """Precedence/associativity declared more than once for an operator."""

    operator: str


@dataclass(frozen=True, slots=True)
class AnnotationWithoutDefinition:
    name: str


@dataclass(frozen=True, slots=True)
class PortWithoutAnnotation:
    name: str


@dataclass(frozen=True, slots=True)
class DuplicateValue:
    """Top-level value bound more than once."""

    name: str


@dataclass(frozen=True, slots=True)
class DuplicateType:
    name: str


@dataclass(frozen=True, slots=True)
class DuplicateLocalDefinition:
    """Name bound twice within one let-expression."""

    name: str


@dataclass(frozen=True, slots=True)
class UnboundAliasVars:
    """
    Type alias whose body references variables missing from its header.

    Precondition: `first_unbound` differs from every explicit and rest var,
    and `rest_unbound` has no duplicates. Splitting off `first_unbound`
    guarantees at least one unbound variable.
    """

    type_name: str
    explicit_vars: tuple[str, ...]
    first_unbound: str
    rest_unbound: tuple[str, ...]
    aliased: TypeExpr

    @property
    def unbound_vars(self) -> tuple[str, ...]:
        return (self.first_unbound, *self.rest_unbound)

    @property
    def all_vars(self) -> tuple[str, ...]:
        return self.explicit_vars + self.unbound_vars


@dataclass(frozen=True, slots=True)
class UnboundUnionVars:
    """
    Union type whose constructors reference variables missing from its header.

    Same precondition as `UnboundAliasVars`. Constructors keep declaration order.
    """

    type_name: str
    explicit_vars: tuple[str, ...]
    first_unbound: str
    rest_unbound: tuple[str, ...]
    constructors: tuple[Constructor, ...]

    @property
    def unbound_vars(self) -> tuple[str, ...]:
        return (self.first_unbound, *self.rest_unbound)

    @property
    def all_vars(self) -> tuple[str, ...]:
        return self.explicit_vars + self.unbound_vars


type FailureFact = (
    ParseFailure
    | InfixRedeclared
    | AnnotationWithoutDefinition
    | PortWithoutAnnotation
    | DuplicateValue
    | DuplicateType
    | DuplicateLocalDefinition
    | UnboundAliasVars
    | UnboundUnionVars
)


__all__ = [
    "AnnotationWithoutDefinition",
    "Constructor",
    "DuplicateLocalDefinition",
    "DuplicateType",
    "DuplicateValue",
    "FailureFact",
    "InfixRedeclared",
    "ParseFailure",
    "PortWithoutAnnotation",
    "UnboundAliasVars",
    "UnboundUnionVars",
]
