# Copyright 2026 The contract_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""Core contract enforcement and property-based verification."""

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
]
