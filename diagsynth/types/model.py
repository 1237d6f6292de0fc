"""Type-expression model consumed by fix-it rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TypeVar:
    """Type variable, e.g. `a`."""

    name: str


@dataclass(frozen=True, slots=True)
class TypeCon:
    """Named type constant, e.g. `Int` or `Maybe`."""

    name: str


@dataclass(frozen=True, slots=True)
class TypeApp:
    """Type application, e.g. `Maybe a`."""

    head: TypeExpr
    args: tuple[TypeExpr, ...]


@dataclass(frozen=True, slots=True)
class TypeArrow:
    """Function type `arg -> result`."""

    arg: TypeExpr
    result: TypeExpr


@dataclass(frozen=True, slots=True)
class TypeTuple:
    items: tuple[TypeExpr, ...]


@dataclass(frozen=True, slots=True)
class TypeRecord:
    """Record type with optional row extension, e.g. `{ r | x : Int }`."""

    fields: tuple[tuple[str, TypeExpr], ...]
    extension: str | None = None


type TypeExpr = TypeVar | TypeCon | TypeApp | TypeArrow | TypeTuple | TypeRecord


__all__ = [
    "TypeApp",
    "TypeArrow",
    "TypeCon",
    "TypeExpr",
    "TypeRecord",
    "TypeTuple",
    "TypeVar",
]
