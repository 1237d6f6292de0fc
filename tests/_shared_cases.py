"""Centralized failure cases used across synthesizer/fix-it tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, cast

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
    PortWithoutAnnotation,
    SystemUnexpected,
    UnboundAliasVars,
    UnboundUnionVars,
    Unexpected,
)
from diagsynth.types import TypeApp, TypeArrow, TypeCon, TypeRecord, TypeTuple, TypeVar


@dataclass(frozen=True, slots=True)
class FailureCase:
    name: str
    fact: FailureFact
    # Text that must appear verbatim in the report title.
    title_name: str | None = None


FAILURE_CASES: tuple[FailureCase, ...] = (
    FailureCase(
        name="parse_failure_mixed_messages",
        fact=ParseFailure(
            messages=(
                SystemUnexpected("end of input"),
                Unexpected("\"}\""),
                Expected("an expression"),
                Generic("ambiguous use of `<|`"),
            )
        ),
    ),
    FailureCase(name="parse_failure_without_messages", fact=ParseFailure(messages=())),
    FailureCase(name="infix_symbolic", fact=InfixRedeclared("+"), title_name="+"),
    FailureCase(name="infix_symbolic_pipe", fact=InfixRedeclared("<|"), title_name="<|"),
    FailureCase(name="infix_alphabetic", fact=InfixRedeclared("mod"), title_name="mod"),
    FailureCase(
        name="annotation_without_definition",
        fact=AnnotationWithoutDefinition("toFloat"),
        title_name="toFloat",
    ),
    FailureCase(
        name="port_without_annotation",
        fact=PortWithoutAnnotation("clicks"),
        title_name="clicks",
    ),
    FailureCase(name="duplicate_value", fact=DuplicateValue("update"), title_name="update"),
    FailureCase(name="duplicate_type", fact=DuplicateType("Model"), title_name="Model"),
    FailureCase(
        name="duplicate_local_definition",
        fact=DuplicateLocalDefinition("x'"),
        title_name="x'",
    ),
    FailureCase(
        name="unbound_alias_single",
        fact=UnboundAliasVars(
            type_name="Pair",
            explicit_vars=("a",),
            first_unbound="b",
            rest_unbound=(),
            aliased=TypeTuple((TypeVar("a"), TypeVar("b"))),
        ),
        title_name="Pair",
    ),
    FailureCase(
        name="unbound_alias_many",
        fact=UnboundAliasVars(
            type_name="Handler",
            explicit_vars=(),
            first_unbound="msg",
            rest_unbound=("model",),
            aliased=TypeRecord(
                fields=(
                    ("update", TypeArrow(TypeVar("msg"), TypeArrow(TypeVar("model"), TypeVar("model")))),
                ),
            ),
        ),
        title_name="Handler",
    ),
    FailureCase(
        name="unbound_union_maybe",
        fact=UnboundUnionVars(
            type_name="Maybe",
            explicit_vars=(),
            first_unbound="a",
            rest_unbound=(),
            constructors=(("Nothing", ()), ("Just", (TypeVar("a"),))),
        ),
        title_name="Maybe",
    ),
    FailureCase(
        name="unbound_union_compound_args",
        fact=UnboundUnionVars(
            type_name="Tree",
            explicit_vars=("a",),
            first_unbound="b",
            rest_unbound=("c",),
            constructors=(
                ("Leaf", ()),
                ("Node", (TypeApp(TypeCon("Tree"), (TypeVar("a"),)), TypeArrow(TypeVar("b"), TypeVar("c")))),
            ),
        ),
        title_name="Tree",
    ),
    FailureCase(
        name="unbound_union_without_constructors",
        fact=UnboundUnionVars(
            type_name="Never",
            explicit_vars=(),
            first_unbound="a",
            rest_unbound=(),
            constructors=(),
        ),
        title_name="Never",
    ),
)

type CaseName = Literal[
    "parse_failure_mixed_messages",
    "parse_failure_without_messages",
    "infix_symbolic",
    "infix_symbolic_pipe",
    "infix_alphabetic",
    "annotation_without_definition",
    "port_without_annotation",
    "duplicate_value",
    "duplicate_type",
    "duplicate_local_definition",
    "unbound_alias_single",
    "unbound_alias_many",
    "unbound_union_maybe",
    "unbound_union_compound_args",
    "unbound_union_without_constructors",
]

CASE_BY_NAME: dict[CaseName, FailureCase] = cast(
    dict[CaseName, FailureCase],
    {case.name: case for case in FAILURE_CASES},
)


def case_fact(name: CaseName) -> FailureFact:
    return CASE_BY_NAME[name].fact


def case_id(case: FailureCase) -> str:
    return case.name
