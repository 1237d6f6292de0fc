"""Shared debug printers for report tests."""

from __future__ import annotations

import os

from diagsynth.diagnostics import Report

PRINT_REPORTS = os.getenv("PRINT_REPORTS", "0").lower() in {"1", "true", "yes", "on"}


def debug_dump_report(label: str, report: Report) -> None:
    if not PRINT_REPORTS:
        return
    print(f"\n=== {label} ===")
    print(f"title: {report.title}")
    print("body:")
    print(report.body)
