# Copyright 2026 The contract_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Console output for contracts, violations and quickcheck reports.

Provides colored output and formatted report display.  The core only
produces report values; this module turns them into text.
"""

import sys
from typing import Iterable, List

from contract_harness.core.contract import Contract
from contract_harness.core.errors import ContractViolation
from contract_harness.core.quickcheck import (
    Failed,
    GenerationExhausted,
    ReportStatus,
    RunReport,
)


def format_report(report: RunReport) -> str:
    """
    Plain-text rendering of a report, without colors.

    The first line is ``report.summary()``; failed reports add one line
    per failing postcondition.
    """
    lines = [report.summary()]
    if isinstance(report, Failed):
        lines.extend(f"  - {d}" for d in report.failing_predicate_descriptions)
    return "\n".join(lines)


class Console:
    """
    Writes contracts, violations and quickcheck reports to a stream.

    Outcome lines are colored when the stream is a terminal: passes green,
    counterexamples red, exhausted runs yellow, hints gray.
    """

    _RESET = "\033[0m"
    _STYLES = {
        "title": "\033[1m",
        "fail": "\033[31m",
        "pass": "\033[32m",
        "exhausted": "\033[33m",
        "hint": "\033[90m",
    }

    def __init__(self, color: bool = True, file=None):
        self._file = file or sys.stdout
        isatty = getattr(self._file, "isatty", None)
        self._use_color = bool(color and isatty is not None and isatty())

    def _paint(self, text: str, style: str) -> str:
        if not self._use_color:
            return text
        return f"{self._STYLES[style]}{text}{self._RESET}"

    def print(self, message: str = "") -> None:
        print(message, file=self._file, flush=True)

    def success(self, message: str) -> None:
        self.print(self._paint(message, "pass"))

    def error(self, message: str) -> None:
        self.print(self._paint(message, "fail"))

    def warning(self, message: str) -> None:
        self.print(self._paint(message, "exhausted"))

    def dim(self, message: str) -> None:
        self.print(self._paint(message, "hint"))

    def report(self, report: RunReport) -> None:
        """Print one quickcheck report: green pass, red failure, yellow exhaustion."""
        if report.status == ReportStatus.PASSED:
            self.success(report.summary())
            return
        if isinstance(report, GenerationExhausted):
            self.warning(report.summary())
            self.dim(f"    {report.attempts} candidates generated; loosen the "
                     f"preconditions or register a narrower generator")
            return

        self.error(report.summary())
        for description in report.failing_predicate_descriptions:
            self.print(f"    - {description}")
        if report.seed is not None:
            self.dim(f"    Replay with seed={report.seed}")

    def violation(self, error: ContractViolation) -> None:
        """Print a contract violation raised by a real call."""
        lines: List[str] = str(error).split('\n')
        self.error(lines[0])
        for line in lines[1:]:
            self.print(f"  {line.strip()}")

    def contract(self, contract: Contract) -> None:
        """Print a contract's signature, parameter docs and conditions."""
        lines = contract.describe().split('\n')
        self.print(self._paint(lines[0], "title"))
        for line in lines[1:]:
            self.print(line)

    def summary(self, reports: Iterable[RunReport]) -> None:
        """Print totals over several reports."""
        reports = list(reports)
        counts = {status: 0 for status in ReportStatus}
        for r in reports:
            counts[r.status] += 1

        self.print()
        self.print("=" * 60)
        self.print(self._paint("QUICKCHECK SUMMARY", "title"))
        self.print("=" * 60)
        self.print(f"Total:     {len(reports)}")
        self.print(f"Passed:    {counts[ReportStatus.PASSED]}")

        failed = counts[ReportStatus.FAILED]
        exhausted = counts[ReportStatus.EXHAUSTED]
        for label, count, style in (("Failed:   ", failed, "fail"),
                                    ("Exhausted:", exhausted, "exhausted")):
            shown = self._paint(str(count), style) if count else str(count)
            self.print(f"{label} {shown}")
        self.print()

        if failed == 0 and exhausted == 0:
            self.success("RESULT: PASSED")
        else:
            self.error("RESULT: FAILED")
