# Copyright 2026 The contract_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Error taxonomy for contract enforcement and verification.

Contract violations on real calls raise immediately.  Outcomes of a
quickcheck run are returned as report values (see
:mod:`contract_harness.core.quickcheck`); only ``assert_quickcheck``
turns them into a ``QuickcheckFailure``.
"""

from typing import Any, List, Mapping, Optional


class ContractError(Exception):
    """Base class for every error raised by contract_harness."""


class ContractDefinitionError(ContractError, ValueError):
    """
    Raised when a contract cannot be built or driven as declared.

    Examples: a predicate references a name that is not a parameter of
    the wrapped function, a precondition references ``result``, or the
    runner cannot find a TypeTag for a parameter.
    """


class ContractViolation(ContractError):
    """
    A call broke its contract.

    Attributes:
        function_name: Name of the wrapped function.
        failures: Description of every predicate that evaluated false,
            in declaration order.
        bindings: The argument bindings of the offending call.
    """

    kind = "Contract"

    def __init__(
        self,
        function_name: str,
        failures: List[str],
        bindings: Optional[Mapping[str, Any]] = None,
    ):
        self.function_name = function_name
        self.failures = list(failures)
        self.bindings = dict(bindings or {})
        super().__init__(self._format())

    def _format(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.bindings.items())
        noun = "condition" if len(self.failures) == 1 else "conditions"
        lines = [f"{self.kind} {noun} failed for {self.function_name}({args}):"]
        lines.extend(f"  - {description}" for description in self.failures)
        return "\n".join(lines)


class ValidationError(ContractViolation, ValueError):
    """
    One or more preconditions failed; the wrapped function was not called.
    """

    kind = "Pre"


class PostconditionError(ContractViolation, AssertionError):
    """
    The wrapped function ran but one or more postconditions failed.

    Side effects of the call have already happened and are not undone.
    """

    kind = "Post"


class QuickcheckFailure(AssertionError):
    """
    Raised by ``assert_quickcheck`` when a run did not pass.

    Attributes:
        report: The ``Failed`` or ``GenerationExhausted`` report.
    """

    def __init__(self, message: str, report: Any = None):
        self.report = report
        super().__init__(message)
