"""Type printer capability and its default implementation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, assert_never

from diagsynth.types.model import (
    TypeApp,
    TypeArrow,
    TypeCon,
    TypeExpr,
    TypeRecord,
    TypeTuple,
    TypeVar,
)


class TypePrinter(Protocol):
    """Renders a type expression as source text."""

    def render(self, expr: TypeExpr, *, needs_parens: bool) -> str: ...


@dataclass(frozen=True, slots=True)
class DefaultTypePrinter:
    """
    Single-line printer using ML-family conventions.

    `needs_parens` marks argument positions: compound types (applications
    with arguments and arrows) are wrapped there, atoms never are.
    """

    def render(self, expr: TypeExpr, *, needs_parens: bool) -> str:
        match expr:
            case TypeVar(name=name) | TypeCon(name=name):
                return name
            case TypeApp(head=head, args=()):
                return self.render(head, needs_parens=needs_parens)
            case TypeApp(head=head, args=args):
                parts = [self.render(head, needs_parens=True)]
                parts.extend(self.render(arg, needs_parens=True) for arg in args)
                return _parenthesize(" ".join(parts), needs_parens)
            case TypeArrow(arg=arg, result=result):
                # Arrows associate to the right.
                left = self.render(arg, needs_parens=isinstance(arg, TypeArrow))
                right = self.render(result, needs_parens=False)
                return _parenthesize(f"{left} -> {right}", needs_parens)
            case TypeTuple(items=()):
                return "()"
            case TypeTuple(items=items):
                inner = ", ".join(self.render(item, needs_parens=False) for item in items)
                return f"( {inner} )"
            case TypeRecord(fields=fields, extension=extension):
                return self._render_record(fields, extension)
            case _:
                assert_never(expr)

    def _render_record(
        self,
        fields: tuple[tuple[str, TypeExpr], ...],
        extension: str | None,
    ) -> str:
        rendered_fields = ", ".join(
            f"{name} : {self.render(field_type, needs_parens=False)}" for name, field_type in fields
        )
        if extension is None:
            return f"{{ {rendered_fields} }}" if fields else "{}"
        if not fields:
            return f"{{ {extension} }}"
        return f"{{ {extension} | {rendered_fields} }}"


def _parenthesize(text: str, needs_parens: bool) -> str:
    return f"({text})" if needs_parens else text


__all__ = ["DefaultTypePrinter", "TypePrinter"]
