"""Report synthesis for syntax-stage compile failures."""

from diagsynth.diagnostics import FailureSpec, Report, failure_spec
from diagsynth.failures import (
    AnnotationWithoutDefinition,
    DuplicateLocalDefinition,
    DuplicateType,
    DuplicateValue,
    Expected,
    FailureFact,
    Generic,
    InfixRedeclared,
    ParseFailure,
    ParseMessage,
    PortWithoutAnnotation,
    SystemUnexpected,
    UnboundAliasVars,
    UnboundUnionVars,
    Unexpected,
)
from diagsynth.report import ReportOptions, synthesize
from diagsynth.types import (
    DefaultTypePrinter,
    TypeApp,
    TypeArrow,
    TypeCon,
    TypeExpr,
    TypePrinter,
    TypeRecord,
    TypeTuple,
    TypeVar,
)

__all__ = [
    "AnnotationWithoutDefinition",
    "DefaultTypePrinter",
    "DuplicateLocalDefinition",
    "DuplicateType",
    "DuplicateValue",
    "Expected",
    "FailureFact",
    "FailureSpec",
    "Generic",
    "InfixRedeclared",
    "ParseFailure",
    "ParseMessage",
    "PortWithoutAnnotation",
    "Report",
    "ReportOptions",
    "SystemUnexpected",
    "TypeApp",
    "TypeArrow",
    "TypeCon",
    "TypeExpr",
    "TypePrinter",
    "TypeRecord",
    "TypeTuple",
    "TypeVar",
    "UnboundAliasVars",
    "UnboundUnionVars",
    "Unexpected",
    "failure_spec",
    "synthesize",
]
