"""Type expressions and printing."""

from diagsynth.types.model import (
    TypeApp,
    TypeArrow,
    TypeCon,
    TypeExpr,
    TypeRecord,
    TypeTuple,
    TypeVar,
)
from diagsynth.types.printer import DefaultTypePrinter, TypePrinter

__all__ = [
    "DefaultTypePrinter",
    "TypeApp",
    "TypeArrow",
    "TypeCon",
    "TypeExpr",
    "TypePrinter",
    "TypeRecord",
    "TypeTuple",
    "TypeVar",
]
