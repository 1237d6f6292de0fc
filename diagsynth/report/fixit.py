"""Fix-it rendering for declarations with unbound type variables."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain, repeat

from diagsynth.diagnostics import Report
from diagsynth.failures import Constructor, UnboundAliasVars, UnboundUnionVars
from diagsynth.text import Doc, hang, hsep, text, vcat
from diagsynth.types import TypeExpr, TypePrinter

DEFAULT_INDENT = 4


def render_alias_declaration(
    type_name: str,
    all_vars: Sequence[str],
    aliased: TypeExpr,
    *,
    printer: TypePrinter,
    indent: int = DEFAULT_INDENT,
) -> str:
    """Render `type alias <name> <vars> =` with the aliased type hung below."""
    header = hsep([text("type alias"), text(type_name), *map(text, all_vars), text("=")])
    body = Doc.text(printer.render(aliased, needs_parens=False))
    return hang(header, indent, body).render()


def render_union_declaration(
    type_name: str,
    all_vars: Sequence[str],
    constructors: Sequence[Constructor],
    *,
    printer: TypePrinter,
    indent: int = DEFAULT_INDENT,
) -> str:
    """
    Render `type <name> <vars>` followed by one constructor per line.

    The first constructor is prefixed with `=`, the rest with `|`. Arguments are
    printed in parenthesized position. No constructors leaves the header alone.
    """
    header = hsep([text("type"), text(type_name), *map(text, all_vars)])
    prefixes = chain(["="], repeat("|"))
    alternatives = [
        text(prefix).beside(_constructor_doc(name, args, printer))
        for prefix, (name, args) in zip(prefixes, constructors)
    ]
    return vcat([header, vcat(alternatives).nest(indent)]).render()


def _constructor_doc(name: str, args: Sequence[TypeExpr], printer: TypePrinter) -> Doc:
    return hsep([text(name), *(Doc.text(printer.render(arg, needs_parens=True)) for arg in args)])


def corrected_declaration(
    fact: UnboundAliasVars | UnboundUnionVars,
    *,
    printer: TypePrinter,
    indent: int = DEFAULT_INDENT,
) -> str:
    """Re-emit the declaration with every type variable in its header."""
    if isinstance(fact, UnboundAliasVars):
        return render_alias_declaration(
            fact.type_name,
            fact.all_vars,
            fact.aliased,
            printer=printer,
            indent=indent,
        )
    return render_union_declaration(
        fact.type_name,
        fact.all_vars,
        fact.constructors,
        printer=printer,
        indent=indent,
    )


def render_unbound_vars(
    type_name: str,
    first_unbound: str,
    rest_unbound: Sequence[str],
    corrected: str,
    *,
    indent: int = DEFAULT_INDENT,
) -> Report:
    """Explain why unlisted type variables are unsound and suggest `corrected`."""
    suffix = "s" if rest_unbound else ""
    names = ", ".join([first_unbound, *rest_unbound])
    pad = " " * indent
    snippet = "".join(f"\n{pad}{line}" if line else "\n" for line in corrected.splitlines())
    return Report(
        title=f"Type '{type_name}' uses unbound type variable{suffix}: {names}",
        body=(
            "All type variables must be listed to avoid sneaky type errors.\n"
            f"Imagine one '{type_name}' where '{first_unbound}' is an Int and\n"
            f"another where it is a Bool. They both look like a '{type_name}'\n"
            "to the type checker, but they are actually different types!\n\n"
            "Maybe you want a definition like this?\n"
            f"{snippet}"
        ),
    )
