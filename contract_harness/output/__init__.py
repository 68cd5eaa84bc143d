# Copyright 2026 The contract_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""Output formatting for contracts and quickcheck reports."""

from contract_harness.output.console import Console, format_report

__all__ = ['Console', 'format_report']
