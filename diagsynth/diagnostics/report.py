"""Rendered report handed to the presentation layer."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Report:
    """
    Human-readable report for one failure.

    Invariant:
    - `title` is a single non-empty line
    - `body` is non-empty and may span lines, including an indented code block
    """

    title: str
    body: str
