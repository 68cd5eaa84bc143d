# Copyright 2026 The contract_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Property-based verification of contracts.

``quickcheck`` drives a contract with generated inputs:

1. pick a TypeTag per parameter (explicit ``types`` or the first
   type-membership precondition);
2. generate ``pool_size`` candidates in order, each a full binding of the
   function's parameters, drawing from the biased generators;
3. keep only candidates for which every precondition holds, preserving
   their generation index;
4. no survivors -> ``GenerationExhausted`` (never reported as a pass);
5. run the function on survivors in order and stop at the first one that
   falsifies a postcondition -> ``Failed`` with the candidate, its index in
   the pool and every failing postcondition description;
6. otherwise ``Passed``.

Reports are values; errors raised by the function under test propagate.
With the same seed and pool size a run is exactly reproducible.

Example::

    report = quickcheck(random_string, pool_size=200, seed=42)
    if not report.passed:
        print(report.summary())
"""

import copy
import random
from abc import ABC, abstractmethod
from collections.abc import Mapping as MappingABC
from dataclasses import dataclass
from enum import Enum
from typing import (
    Any, ClassVar, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple,
    Union,
)

from contract_harness.core.contract import Contract
from contract_harness.core.errors import ContractDefinitionError, QuickcheckFailure
from contract_harness.core.predicates import freeze_bindings
from contract_harness.core.settings import QuickcheckSettings, get_default_settings
from contract_harness.core.strategies import GeneratorRegistry, default_registry
from contract_harness.core.type_tags import TypeTag


class ReportStatus(Enum):
    """Outcome of a verification run."""
    PASSED = "passed"
    FAILED = "failed"
    EXHAUSTED = "exhausted"


# ---------------------------------------------------------------------------
# Candidate
# ---------------------------------------------------------------------------

class Candidate(MappingABC):
    """
    One generated binding of every parameter.

    Immutable.  ``index`` is the 1-based position in the generated pool,
    so a failing candidate can be replayed by regenerating with the same
    seed up to that index.
    """

    def __init__(self, index: int, values: Mapping[str, Any]):
        self.index = index
        self._values = freeze_bindings(values)

    @property
    def bindings(self) -> Mapping[str, Any]:
        return self._values

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other) -> bool:
        if isinstance(other, Candidate):
            return self.index == other.index and dict(self) == dict(other)
        return super().__eq__(other)

    __hash__ = None

    def format_bindings(self) -> str:
        return ", ".join(f"{k} = {v!r}" for k, v in self._values.items())

    def __repr__(self) -> str:
        return f"Candidate(#{self.index}: {self.format_bindings()})"


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RunReport(ABC):
    """Common fields of every verification outcome."""

    contract_name: str
    """Name of the verified function."""

    seed: Optional[int]
    """Seed of the random source, when the run seeded one."""

    status: ClassVar[ReportStatus]

    @property
    def passed(self) -> bool:
        return self.status == ReportStatus.PASSED

    @abstractmethod
    def summary(self) -> str:
        """One-line human-readable outcome."""


@dataclass(frozen=True)
class Passed(RunReport):
    """Every surviving candidate satisfied every postcondition."""

    surviving_count: int
    """Number of candidates that passed the preconditions and were run."""

    status: ClassVar[ReportStatus] = ReportStatus.PASSED

    def summary(self) -> str:
        return (f"Quickcheck for {self.contract_name} passed on "
                f"{self.surviving_count} random examples!")


@dataclass(frozen=True)
class Failed(RunReport):
    """A counterexample: the first survivor that falsified a postcondition."""

    candidate: Candidate
    """The failing binding, exactly as generated."""

    generation_index: int
    """1-based position of the candidate in the generated pool."""

    failing_predicate_descriptions: Tuple[str, ...]
    """Every postcondition that did not hold, in declaration order."""

    status: ClassVar[ReportStatus] = ReportStatus.FAILED

    def summary(self) -> str:
        return (f"Quickcheck for {self.contract_name} failed on item "
                f"#{self.generation_index}: {self.candidate.format_bindings()}")


@dataclass(frozen=True)
class GenerationExhausted(RunReport):
    """No generated candidate satisfied the preconditions."""

    attempts: int
    """Candidates generated and rejected."""

    pool_size: int
    """Requested pool size."""

    status: ClassVar[ReportStatus] = ReportStatus.EXHAUSTED

    def summary(self) -> str:
        return (f"Quickcheck for {self.contract_name} exhausted generation: "
                f"none of {self.attempts} candidates satisfied the "
                f"preconditions")


Report = Union[Passed, Failed, GenerationExhausted]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _resolve_contract(target: Any) -> Contract:
    if isinstance(target, Contract):
        return target
    contract = getattr(target, 'contract', None)
    if isinstance(contract, Contract):
        return contract
    raise ContractDefinitionError(
        f"{target!r} has no contract; wrap it with ensure(...) first"
    )


def _parameter_tags(contract: Contract, registry: GeneratorRegistry) -> Dict[str, TypeTag]:
    tags = {}
    missing = []
    for name in contract.parameters:
        tag = contract.type_for(name)
        if tag is None:
            missing.append(name)
            continue
        if not registry.knows(tag):
            raise ContractDefinitionError(
                f"{contract.name}: no generator registered for {name} ({tag})"
            )
        tags[name] = tag
    if missing:
        raise ContractDefinitionError(
            f"{contract.name}: cannot generate {missing}; pass types={{...}} "
            f"or add an is_type(...) precondition for each parameter"
        )
    return tags


def size_for(index: int, size_bound: int) -> int:
    """
    Size bound for the candidate at 1-based ``index``.

    Grows by one per candidate until it reaches ``size_bound``.  The ramp
    does not depend on the pool size, so a shorter pool generated from the
    same seed is a prefix of a longer one.
    """
    return max(0, min(size_bound, index))


def _log(enabled: bool, message: str) -> None:
    if enabled:
        print(f"[quickcheck] {message}", flush=True)


def _first_counterexample(
    contract: Contract,
    survivors: Iterable[Candidate],
) -> Optional[Tuple[Candidate, List[str]]]:
    for candidate in survivors:
        # Postconditions see the arguments the function received; the
        # reported candidate stays exactly as generated.
        arguments = freeze_bindings(copy.deepcopy(dict(candidate)))
        result = contract.invoke(arguments)
        failures = contract.failing_postconditions(arguments, result)
        if failures:
            return candidate, failures
    return None


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

def generate_candidates(
    contract: Contract,
    pool_size: int,
    rng: random.Random,
    registry: GeneratorRegistry = default_registry,
    settings: Optional[QuickcheckSettings] = None,
) -> List[Candidate]:
    """
    Generate ``pool_size`` raw candidates in generation-index order.

    Exposed separately so a reported counterexample can be replayed:
    regenerating up to its generation index with an identically seeded
    ``rng`` yields the same candidate last.
    """
    settings = settings or get_default_settings()
    tags = _parameter_tags(contract, registry)
    session = registry.session(rng, settings.edge_probability, settings.max_depth)
    pool = []
    for index in range(1, pool_size + 1):
        size = size_for(index, settings.size_bound)
        values = {name: session.generate(tag, size, slot=name)
                  for name, tag in tags.items()}
        pool.append(Candidate(index, values))
    return pool


def quickcheck(
    target: Any,
    pool_size: Optional[int] = None,
    *,
    size_bound: Optional[int] = None,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    registry: Optional[GeneratorRegistry] = None,
    settings: Optional[QuickcheckSettings] = None,
    verbose: Optional[bool] = None,
) -> Report:
    """
    Verify a contract's postconditions over generated inputs.

    Args:
        target: A ``Contract`` or a function wrapped with ``ensure``.
        pool_size: Raw candidates to generate before filtering.
        size_bound: Largest size/magnitude handed to generators.
        seed: Seed for a fresh ``random.Random``.  When neither ``seed``
            nor ``rng`` is given, a seed is drawn from process entropy and
            recorded on the report.
        rng: Caller-supplied random source (takes precedence over ``seed``).
        registry: Generator registry (defaults to the process-wide one).
        settings: Base settings (defaults to ``get_default_settings()``).
        verbose: Print progress lines.

    Returns:
        ``Passed``, ``Failed`` or ``GenerationExhausted``.

    Raises:
        ContractDefinitionError: If a parameter has no usable TypeTag.
        Exception: Whatever the function under test raises.
    """
    contract = _resolve_contract(target)
    settings = (settings or get_default_settings()).with_changes(
        pool_size=pool_size, size_bound=size_bound, seed=seed, verbose=verbose,
    )
    registry = registry or default_registry

    if rng is None:
        run_seed = settings.seed
        if run_seed is None:
            run_seed = random.SystemRandom().randrange(2**32)
        rng = random.Random(run_seed)
    else:
        run_seed = seed

    pool = generate_candidates(contract, settings.pool_size, rng, registry, settings)
    _log(settings.verbose,
         f"{contract.name}: generated {len(pool)} candidates (seed={run_seed})")

    survivors = [c for c in pool if contract.accepts(c.bindings)]
    _log(settings.verbose,
         f"{contract.name}: {len(survivors)}/{len(pool)} candidates satisfy "
         f"the preconditions")

    if not survivors:
        return GenerationExhausted(
            contract_name=contract.name,
            seed=run_seed,
            attempts=settings.pool_size,
            pool_size=settings.pool_size,
        )

    found = _first_counterexample(contract, survivors)
    if found is not None:
        candidate, failures = found
        _log(settings.verbose,
             f"{contract.name}: counterexample at item #{candidate.index}")
        return Failed(
            contract_name=contract.name,
            seed=run_seed,
            candidate=candidate,
            generation_index=candidate.index,
            failing_predicate_descriptions=tuple(failures),
        )

    return Passed(
        contract_name=contract.name,
        seed=run_seed,
        surviving_count=len(survivors),
    )


def check_examples(target: Any, examples: Iterable[Mapping[str, Any]]) -> Report:
    """
    Run the quickcheck filter and postcondition loop over given bindings.

    Useful for recorded calls or hand-picked regression cases.  Examples
    are indexed from 1 in the order given; parameters omitted from an
    example take the function's defaults.
    """
    contract = _resolve_contract(target)
    pool = [Candidate(i, contract.bind(**example))
            for i, example in enumerate(examples, start=1)]
    survivors = [c for c in pool if contract.accepts(c.bindings)]
    if not survivors:
        return GenerationExhausted(
            contract_name=contract.name, seed=None,
            attempts=len(pool), pool_size=len(pool),
        )

    found = _first_counterexample(contract, survivors)
    if found is not None:
        candidate, failures = found
        return Failed(
            contract_name=contract.name, seed=None,
            candidate=candidate, generation_index=candidate.index,
            failing_predicate_descriptions=tuple(failures),
        )
    return Passed(contract_name=contract.name, seed=None,
                  surviving_count=len(survivors))


def assert_quickcheck(target: Any, pool_size: Optional[int] = None, **options) -> Passed:
    """
    Run ``quickcheck`` and raise ``QuickcheckFailure`` unless it passed.

    Intended for use inside test functions::

        def test_random_string():
            assert_quickcheck(random_string, pool_size=500, seed=7)

    Raises:
        QuickcheckFailure: On ``Failed`` (message lists the failing
            postconditions and the seed) or ``GenerationExhausted``.
    """
    report = quickcheck(target, pool_size, **options)
    if report.passed:
        return report

    lines = [report.summary()]
    if isinstance(report, Failed):
        lines.extend(f"  - {d}" for d in report.failing_predicate_descriptions)
    if report.seed is not None:
        lines.append(f"  (seed={report.seed})")
    raise QuickcheckFailure("\n".join(lines), report=report)
