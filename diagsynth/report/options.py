"""Report synthesis configuration."""

from dataclasses import dataclass, field

from diagsynth.types import DefaultTypePrinter, TypePrinter


@dataclass(frozen=True, slots=True)
class ReportOptions:
    """Injected capabilities and layout settings for report synthesis."""

    type_printer: TypePrinter = field(default_factory=DefaultTypePrinter)
    fixit_indent: int = 4

    def __post_init__(self):
        if self.fixit_indent < 0:
            raise ValueError("fixit_indent cannot be negative")

    @staticmethod
    def with_printer(printer: TypePrinter) -> "ReportOptions":
        return ReportOptions(type_printer=printer)
