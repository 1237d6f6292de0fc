"""Layout documents."""

from diagsynth.text.doc import Doc, hang, hsep, text, vcat

__all__ = ["Doc", "hang", "hsep", "text", "vcat"]
