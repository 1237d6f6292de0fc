"""Diagnostic codes for syntax-stage failures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal, assert_never

from diagsynth.failures import (
    AnnotationWithoutDefinition,
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

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class FailureSpec:
    code: str
    severity: Severity = "error"
    category: str = "syntax"


SYNTAX_PARSE_FAILURE: Final[FailureSpec] = FailureSpec(code="SYNTAX_PARSE_FAILURE")

SYNTAX_INFIX_REDECLARED: Final[FailureSpec] = FailureSpec(code="SYNTAX_INFIX_REDECLARED")

SYNTAX_ANNOTATION_WITHOUT_DEFINITION: Final[FailureSpec] = FailureSpec(
    code="SYNTAX_ANNOTATION_WITHOUT_DEFINITION",
)

SYNTAX_PORT_WITHOUT_ANNOTATION: Final[FailureSpec] = FailureSpec(
    code="SYNTAX_PORT_WITHOUT_ANNOTATION",
)

SYNTAX_DUPLICATE_VALUE: Final[FailureSpec] = FailureSpec(code="SYNTAX_DUPLICATE_VALUE")

SYNTAX_DUPLICATE_TYPE: Final[FailureSpec] = FailureSpec(code="SYNTAX_DUPLICATE_TYPE")

SYNTAX_DUPLICATE_LOCAL_DEFINITION: Final[FailureSpec] = FailureSpec(
    code="SYNTAX_DUPLICATE_LOCAL_DEFINITION",
)

SYNTAX_UNBOUND_ALIAS_VARS: Final[FailureSpec] = FailureSpec(code="SYNTAX_UNBOUND_ALIAS_VARS")

SYNTAX_UNBOUND_UNION_VARS: Final[FailureSpec] = FailureSpec(code="SYNTAX_UNBOUND_UNION_VARS")


def failure_spec(fact: FailureFact) -> FailureSpec:
    match fact:
        case ParseFailure():
            return SYNTAX_PARSE_FAILURE
        case InfixRedeclared():
            return SYNTAX_INFIX_REDECLARED
        case AnnotationWithoutDefinition():
            return SYNTAX_ANNOTATION_WITHOUT_DEFINITION
        case PortWithoutAnnotation():
            return SYNTAX_PORT_WITHOUT_ANNOTATION
        case DuplicateValue():
            return SYNTAX_DUPLICATE_VALUE
        case DuplicateType():
            return SYNTAX_DUPLICATE_TYPE
        case DuplicateLocalDefinition():
            return SYNTAX_DUPLICATE_LOCAL_DEFINITION
        case UnboundAliasVars():
            return SYNTAX_UNBOUND_ALIAS_VARS
        case UnboundUnionVars():
            return SYNTAX_UNBOUND_UNION_VARS
        case _:
            assert_never(fact)
