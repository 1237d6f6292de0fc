"""Diagnostics."""

from diagsynth.diagnostics.codes import (
    SYNTAX_ANNOTATION_WITHOUT_DEFINITION,
    SYNTAX_DUPLICATE_LOCAL_DEFINITION,
    SYNTAX_DUPLICATE_TYPE,
    SYNTAX_DUPLICATE_VALUE,
    SYNTAX_INFIX_REDECLARED,
    SYNTAX_PARSE_FAILURE,
    SYNTAX_PORT_WITHOUT_ANNOTATION,
    SYNTAX_UNBOUND_ALIAS_VARS,
    SYNTAX_UNBOUND_UNION_VARS,
    FailureSpec,
    Severity,
    failure_spec,
)
from diagsynth.diagnostics.report import Report

__all__ = [
    "SYNTAX_ANNOTATION_WITHOUT_DEFINITION",
    "SYNTAX_DUPLICATE_LOCAL_DEFINITION",
    "SYNTAX_DUPLICATE_TYPE",
    "SYNTAX_DUPLICATE_VALUE",
    "SYNTAX_INFIX_REDECLARED",
    "SYNTAX_PARSE_FAILURE",
    "SYNTAX_PORT_WITHOUT_ANNOTATION",
    "SYNTAX_UNBOUND_ALIAS_VARS",
    "SYNTAX_UNBOUND_UNION_VARS",
    "FailureSpec",
    "Report",
    "Severity",
    "failure_spec",
]
