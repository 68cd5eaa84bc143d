#!/usr/bin/env python3
# Copyright 2026 The contract_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for console rendering."""

import io

import pytest

from contract_harness.core.contract import Contract, ensure
from contract_harness.core.errors import ValidationError
from contract_harness.core.predicates import (
    RESULT, at_least, is_type, length_equals, ref,
)
from contract_harness.core.quickcheck import (
    Candidate, Failed, GenerationExhausted, Passed,
)
from contract_harness.core.type_tags import INTEGER
from contract_harness.output.console import Console, format_report


@pytest.fixture
def output():
    buffer = io.StringIO()
    return Console(color=False, file=buffer), buffer


FAILED = Failed(
    contract_name="random_string",
    seed=42,
    candidate=Candidate(3, {"n": 4}),
    generation_index=3,
    failing_predicate_descriptions=("length(result) == n",),
)
PASSED = Passed(contract_name="reverse", seed=1, surviving_count=12)
EXHAUSTED = GenerationExhausted(contract_name="never", seed=None,
                                attempts=100, pool_size=100)


class TestFormatReport:
    """Tests for plain-text report rendering."""

    def test_failed(self):
        assert format_report(FAILED) == (
            "Quickcheck for random_string failed on item #3: n = 4\n"
            "  - length(result) == n"
        )

    def test_passed(self):
        assert format_report(PASSED) == PASSED.summary()


class TestConsole:
    """Tests for Console output."""

    def test_no_color_for_non_tty(self):
        console = Console(color=True, file=io.StringIO())
        console.error("plain")
        assert "\033[" not in console._file.getvalue()

    def test_color_for_tty(self):
        class Terminal(io.StringIO):
            def isatty(self):
                return True

        console = Console(color=True, file=Terminal())
        console.report(PASSED)
        console.report(EXHAUSTED)
        text = console._file.getvalue()
        assert text.startswith("\033[32mQuickcheck for reverse passed")
        assert "\033[33mQuickcheck for never exhausted" in text

    def test_report_failed(self, output):
        console, buffer = output
        console.report(FAILED)
        text = buffer.getvalue()
        assert "failed on item #3: n = 4" in text
        assert "    - length(result) == n" in text
        assert "Replay with seed=42" in text

    def test_report_exhausted(self, output):
        console, buffer = output
        console.report(EXHAUSTED)
        text = buffer.getvalue()
        assert "exhausted generation" in text
        assert "100 candidates generated" in text

    def test_violation(self, output):
        console, buffer = output
        checked = ensure([is_type("n", INTEGER), at_least("n", 0)],
                         is_type(RESULT, INTEGER), lambda n: n, name="ident")
        with pytest.raises(ValidationError) as exc_info:
            checked(-1)
        console.violation(exc_info.value)
        lines = buffer.getvalue().splitlines()
        assert lines[0] == "Precondition failed for ident(n=-1):"
        assert lines[1] == "  - n >= 0"

    def test_contract(self, output):
        console, buffer = output
        console.contract(Contract(lambda n: "x" * n, is_type("n", INTEGER),
                                  length_equals(RESULT, ref("n")), name="pad"))
        text = buffer.getvalue()
        assert text.startswith("pad(n)\n")
        assert "  ensures:" in text

    def test_summary_counts(self, output):
        console, buffer = output
        console.summary([PASSED, PASSED, FAILED, EXHAUSTED])
        text = buffer.getvalue()
        assert "Total:     4" in text
        assert "Passed:    2" in text
        assert "Failed:    1" in text
        assert "Exhausted: 1" in text
        assert "RESULT: FAILED" in text

    def test_summary_all_passed(self, output):
        console, buffer = output
        console.summary([PASSED])
        assert "RESULT: PASSED" in buffer.getvalue()
