"""Parser message to hint-line translation."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final, assert_never

from diagsynth.failures import (
    Expected,
    Generic,
    ParseMessage,
    SystemUnexpected,
    Unexpected,
)

SYSTEM_UNEXPECTED_PREFIX: Final[str] = "SysUnExpect: "
UNEXPECTED_PREFIX: Final[str] = "UnExpect: "

NO_PARSE_DETAILS: Final[str] = "No further details were reported by the parser."


def translate_parse_message(message: ParseMessage) -> str:
    # Expected and Generic share the UnExpect prefix.
    match message:
        case SystemUnexpected(text=text):
            return SYSTEM_UNEXPECTED_PREFIX + text
        case Unexpected(text=text):
            return UNEXPECTED_PREFIX + text
        case Expected(text=text):
            return UNEXPECTED_PREFIX + text
        case Generic(text=text):
            return UNEXPECTED_PREFIX + text
        case _:
            assert_never(message)


def parse_failure_hints(messages: Iterable[ParseMessage]) -> str:
    """One hint line per message, in input order."""
    lines = [translate_parse_message(message) for message in messages]
    if not lines:
        return NO_PARSE_DETAILS
    return "\n".join(lines)
