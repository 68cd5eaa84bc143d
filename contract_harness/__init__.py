# Copyright 2026 The contract_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
contract_harness - Runtime contracts and property-based verification.

A small library for declaring what a function expects and promises:
- Self-describing predicates that compose with and/or/not
- ``ensure``: enforce every precondition and postcondition on each call,
  reporting all failures at once
- ``quickcheck``: drive the same contract with edge-case-biased random
  inputs and report a reproducible counterexample
- Console rendering of violations and reports

Example usage:
    from contract_harness import (
        ensure, quickcheck, is_type, at_least, at_most, length_equals,
        ref, RESULT, INTEGER,
    )

    @ensure(
        preconditions=[is_type("n", INTEGER), at_least("n", 0), at_most("n", 100)],
        postconditions=length_equals(RESULT, ref("n")),
    )
    def random_string(n):
        return "x" * n

    report = quickcheck(random_string, seed=42)
    print(report.summary())
"""

from contract_harness.core.errors import (
    ContractError,
    ContractDefinitionError,
    ContractViolation,
    ValidationError,
    PostconditionError,
    QuickcheckFailure,
)
from contract_harness.core.type_tags import (
    TypeTag,
    NUMBER,
    INTEGER,
    TEXT,
    BOOLEAN,
    NULL,
    sequence_of,
    record_of,
)
from contract_harness.core.predicates import (
    Predicate,
    RESULT,
    ITEM,
    make_predicate,
    all_of,
    any_of,
    negate,
    ref,
    is_type,
    all_satisfy,
    equals,
    not_equals,
    greater_than,
    at_least,
    less_than,
    at_most,
    length_equals,
    length_at_least,
    length_at_most,
    check,
)
from contract_harness.core.strategies import (
    BiasProfile,
    GeneratorRegistry,
    GenerationSession,
    default_registry,
)
from contract_harness.core.contract import Contract, ensure
from contract_harness.core.settings import (
    QuickcheckSettings,
    get_default_settings,
    set_default_settings,
    settings_scope,
)
from contract_harness.core.quickcheck import (
    ReportStatus,
    Candidate,
    RunReport,
    Passed,
    Failed,
    GenerationExhausted,
    quickcheck,
    check_examples,
    assert_quickcheck,
    generate_candidates,
)

from contract_harness.output.console import Console, format_report

__all__ = [
    # Errors
    'ContractError',
    'ContractDefinitionError',
    'ContractViolation',
    'ValidationError',
    'PostconditionError',
    'QuickcheckFailure',
    # Type tags
    'TypeTag',
    'NUMBER',
    'INTEGER',
    'TEXT',
    'BOOLEAN',
    'NULL',
    'sequence_of',
    'record_of',
    # Predicates
    'Predicate',
    'RESULT',
    'ITEM',
    'make_predicate',
    'all_of',
    'any_of',
    'negate',
    'ref',
    'is_type',
    'all_satisfy',
    'equals',
    'not_equals',
    'greater_than',
    'at_least',
    'less_than',
    'at_most',
    'length_equals',
    'length_at_least',
    'length_at_most',
    'check',
    # Generators
    'BiasProfile',
    'GeneratorRegistry',
    'GenerationSession',
    'default_registry',
    # Contracts
    'Contract',
    'ensure',
    # Settings
    'QuickcheckSettings',
    'get_default_settings',
    'set_default_settings',
    'settings_scope',
    # Verification
    'ReportStatus',
    'Candidate',
    'RunReport',
    'Passed',
    'Failed',
    'GenerationExhausted',
    'quickcheck',
    'check_examples',
    'assert_quickcheck',
    'generate_candidates',
    # Output
    'Console',
    'format_report',
]
