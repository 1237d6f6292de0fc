"""Failure-to-report synthesis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, assert_never
import unicodedata

from diagsynth.diagnostics import Report
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
from diagsynth.report.fixit import corrected_declaration, render_unbound_vars
from diagsynth.report.options import ReportOptions
from diagsynth.report.parse_hints import parse_failure_hints
from diagsynth.types import TypePrinter

PARSE_FAILURE_TITLE: Final[str] = "Problem when parsing your code!"

_OPERATOR_CHARS: Final[frozenset[str]] = frozenset("+-/*=.$<>:&|^?%#@~!")


@dataclass(frozen=True, slots=True)
class _DuplicateWording:
    """How a duplicate-name report refers to the clashing bindings."""

    noun: str
    scope: str = ""


_TOP_LEVEL_VALUES: Final[_DuplicateWording] = _DuplicateWording(noun="top-level values")
_TYPES: Final[_DuplicateWording] = _DuplicateWording(noun="types")
_LOCAL_VALUES: Final[_DuplicateWording] = _DuplicateWording(
    noun="values",
    scope=" in this let-expression",
)


def synthesize(
    fact: FailureFact,
    options: ReportOptions | None = None,
    *,
    type_printer: TypePrinter | None = None,
) -> Report:
    """Render one failure as a title/body report. Pure and total."""
    resolved = _resolve_options(options, type_printer=type_printer)

    match fact:
        case ParseFailure(messages=messages):
            return Report(title=PARSE_FAILURE_TITLE, body=parse_failure_hints(messages))
        case InfixRedeclared(operator=operator):
            return _infix_redeclared(operator)
        case AnnotationWithoutDefinition(name=name):
            return Report(
                title=(
                    f"There is a type annotation for '{name}' but there "
                    "is no corresponding definition!"
                ),
                body=(
                    "Directly below the type annotation, put a definition like:\n\n"
                    f"    {name} = 42"
                ),
            )
        case PortWithoutAnnotation(name=name):
            return Report(
                title=f"Port '{name}' does not have a type annotation!",
                body=(
                    "Directly above the port definition, I need something like this:\n\n"
                    f"    port {name} : Signal Int"
                ),
            )
        case DuplicateValue(name=name):
            return _duplicate_name(name, _TOP_LEVEL_VALUES)
        case DuplicateType(name=name):
            return _duplicate_name(name, _TYPES)
        case DuplicateLocalDefinition(name=name):
            return _duplicate_name(name, _LOCAL_VALUES)
        case UnboundAliasVars() | UnboundUnionVars():
            corrected = corrected_declaration(
                fact,
                printer=resolved.type_printer,
                indent=resolved.fixit_indent,
            )
            return render_unbound_vars(
                fact.type_name,
                fact.first_unbound,
                fact.rest_unbound,
                corrected,
                indent=resolved.fixit_indent,
            )
        case _:
            assert_never(fact)


def is_symbolic_operator(name: str) -> bool:
    """True when every character is an operator symbol, e.g. `+` or `<|`."""
    return all(_is_symbol_char(char) for char in name)


def _is_symbol_char(char: str) -> bool:
    return char in _OPERATOR_CHARS or unicodedata.category(char) in {"Sm", "Sc", "Sk", "So"}


def _infix_redeclared(operator: str) -> Report:
    shown = f"({operator})" if is_symbolic_operator(operator) else f"`{operator}`"
    return Report(
        title=f"The infix declarations for {shown} must be removed.",
        body=(
            "The precedence and associativity can only be set in one place, and\n"
            "this information has already been set somewhere else."
        ),
    )


def _duplicate_name(name: str, wording: _DuplicateWording) -> Report:
    return Report(
        title=(
            f"Naming multiple {wording.noun} '{name}'{wording.scope} makes things ambiguous. "
            f"When you say '{name}' which one do you want?!"
        ),
        body=(
            f"Find all the {wording.noun} named '{name}'{wording.scope} and\n"
            "do some renaming. Make sure the names are distinct!"
        ),
    )


def _resolve_options(
    options: ReportOptions | None,
    *,
    type_printer: TypePrinter | None,
) -> ReportOptions:
    if options is not None:
        if type_printer is not None:
            raise ValueError("Pass either options or type_printer, not both")
        return options
    if type_printer is not None:
        return ReportOptions.with_printer(type_printer)
    return ReportOptions()
