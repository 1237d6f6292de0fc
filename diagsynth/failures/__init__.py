"""Failure taxonomy."""

from diagsynth.failures.messages import (
    Expected,
    Generic,
    ParseMessage,
    SystemUnexpected,
    Unexpected,
)
from diagsynth.failures.model import (
    AnnotationWithoutDefinition,
    Constructor,
    DuplicateLocalDefinition,
    DuplicateType,
    DuplicateValue,
    FailureFact,
    InfixRedeclared,
    ParseFailure,
    PortWithoutAnnotation,
    UnboundAliasVars,
    UnboundUnionVars,
)

__all__ = [
    "AnnotationWithoutDefinition",
    "Constructor",
    "DuplicateLocalDefinition",
    "DuplicateType",
    "DuplicateValue",
    "Expected",
    "FailureFact",
    "Generic",
    "InfixRedeclared",
    "ParseFailure",
    "ParseMessage",
    "PortWithoutAnnotation",
    "SystemUnexpected",
    "UnboundAliasVars",
    "UnboundUnionVars",
    "Unexpected",
]
