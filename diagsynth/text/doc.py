"""Line-oriented layout documents for generated source snippets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce


@dataclass(frozen=True, slots=True)
class Doc:
    """
    Immutable block of text lines.

    The empty document has no lines and is the identity for `beside` and
    `vcat`, so optional pieces can be dropped without special cases.
    """

    lines: tuple[str, ...] = ()

    @staticmethod
    def text(value: str) -> "Doc":
        """Create a document from (possibly multi-line) text."""
        return Doc(tuple(value.split("\n")))

    @staticmethod
    def empty() -> "Doc":
        return Doc(())

    @property
    def is_empty(self) -> bool:
        return len(self.lines) == 0

    @property
    def last_width(self) -> int:
        return len(self.lines[-1]) if self.lines else 0

    def beside(self, other: "Doc", *, space: bool = True) -> "Doc":
        """
        Place `other` after the last line of this document.

        Continuation lines of `other` are shifted right so they stay aligned
        with its first line.
        """
        if self.is_empty:
            return other
        if other.is_empty:
            return self

        separator = " " if space else ""
        joined = self.lines[-1] + separator + other.lines[0]
        pad = " " * (self.last_width + len(separator))
        rest = tuple(pad + line if line else line for line in other.lines[1:])
        return Doc(self.lines[:-1] + (joined,) + rest)

    def nest(self, indent: int) -> "Doc":
        if indent < 0:
            raise ValueError("Doc indent cannot be negative")
        pad = " " * indent
        return Doc(tuple(pad + line if line else line for line in self.lines))

    def render(self) -> str:
        return "\n".join(self.lines)


def text(value: str) -> Doc:
    return Doc.text(value)


def hsep(docs: Iterable[Doc]) -> Doc:
    """Join documents horizontally with single spaces."""
    return reduce(lambda left, right: left.beside(right), docs, Doc.empty())


def vcat(docs: Iterable[Doc]) -> Doc:
    """Stack documents vertically, skipping empty ones."""
    lines: list[str] = []
    for doc in docs:
        lines.extend(doc.lines)
    return Doc(tuple(lines))


def hang(header: Doc, indent: int, body: Doc) -> Doc:
    """Put `body` on the lines below `header`, nested by `indent`."""
    return vcat((header, body.nest(indent)))


__all__ = ["Doc", "hang", "hsep", "text", "vcat"]
