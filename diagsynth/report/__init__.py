"""Report synthesis: dispatch, fix-it rendering, and parse hints."""

from diagsynth.report.fixit import (
    corrected_declaration,
    render_alias_declaration,
    render_unbound_vars,
    render_union_declaration,
)
from diagsynth.report.options import ReportOptions
from diagsynth.report.parse_hints import (
    NO_PARSE_DETAILS,
    SYSTEM_UNEXPECTED_PREFIX,
    UNEXPECTED_PREFIX,
    parse_failure_hints,
    translate_parse_message,
)
from diagsynth.report.synthesize import PARSE_FAILURE_TITLE, is_symbolic_operator, synthesize

__all__ = [
    "NO_PARSE_DETAILS",
    "PARSE_FAILURE_TITLE",
    "SYSTEM_UNEXPECTED_PREFIX",
    "UNEXPECTED_PREFIX",
    "ReportOptions",
    "corrected_declaration",
    "is_symbolic_operator",
    "parse_failure_hints",
    "render_alias_declaration",
    "render_unbound_vars",
    "render_union_declaration",
    "synthesize",
    "translate_parse_message",
]
