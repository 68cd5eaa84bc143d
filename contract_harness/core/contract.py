# Copyright 2026 The contract_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Contract wrapper: preconditions, postconditions and the wrapped function.

``ensure`` builds a ``Contract`` once, at definition time, and returns a
callable that enforces it on every call:

1. arguments are bound to the function's parameter names;
2. every precondition is evaluated (no short-circuit) and all failures
   are reported together in a ``ValidationError``; the function is not
   called;
3. otherwise the function runs, its return value is bound to ``result``
   and every postcondition is evaluated; failures raise a
   ``PostconditionError`` after the function's side effects happened;
4. otherwise the result is returned unchanged.

Example::

    from contract_harness import (
        ensure, is_type, at_least, length_equals, ref, RESULT,
    )
    from contract_harness.core.type_tags import INTEGER, TEXT

    @ensure(
        preconditions=[is_type("n", INTEGER), at_least("n", 0)],
        postconditions=[is_type(RESULT, TEXT), length_equals(RESULT, ref("n"))],
    )
    def random_string(n):
        return "x" * n
"""

import functools
import inspect
from types import MappingProxyType
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple, Union

from contract_harness.core.errors import (
    ContractDefinitionError,
    PostconditionError,
    ValidationError,
)
from contract_harness.core.predicates import (
    RESULT,
    Bindings,
    Predicate,
    freeze_bindings,
    with_result,
)
from contract_harness.core.type_tags import TypeTag

Predicates = Union[Predicate, Iterable[Predicate]]


def _as_tuple(predicates: Predicates) -> Tuple[Predicate, ...]:
    if isinstance(predicates, Predicate):
        return (predicates,)
    return tuple(predicates)


class Contract:
    """
    Immutable bundle of preconditions, postconditions and a function.

    Attributes:
        fn: The wrapped function.
        name: Name used in diagnostics and reports.
        parameters: The function's declared parameter names, in order.
        preconditions: Checked before the call, all of them, in order.
        postconditions: Checked after the call, all of them, in order.
        types: Generation hints ``{parameter: TypeTag}``.
        docs: Human-readable parameter descriptions.  Only used by
            ``describe``.
    """

    def __init__(
        self,
        fn: Callable,
        preconditions: Predicates = (),
        postconditions: Predicates = (),
        types: Optional[Mapping[str, TypeTag]] = None,
        docs: Optional[Mapping[str, str]] = None,
        name: Optional[str] = None,
    ):
        self.fn = fn
        self.name = name or getattr(fn, '__name__', repr(fn))
        self.signature = inspect.signature(fn)
        self.parameters = tuple(self.signature.parameters)
        self.preconditions = _as_tuple(preconditions)
        self.postconditions = _as_tuple(postconditions)
        self.types = MappingProxyType(dict(types or {}))
        self.docs = MappingProxyType(dict(docs or {}))
        self._validate()
        self._frozen = True

    def __setattr__(self, key, value):
        if getattr(self, '_frozen', False):
            raise AttributeError(f"Contract for {self.name} is immutable")
        super().__setattr__(key, value)

    def _validate(self) -> None:
        declared = set(self.parameters)
        if RESULT in declared:
            raise ContractDefinitionError(
                f"{self.name}: parameter name '{RESULT}' is reserved for "
                f"the return value"
            )
        if not self.postconditions:
            raise ContractDefinitionError(
                f"{self.name}: at least one postcondition is required"
            )
        for p in self.preconditions:
            if p.params is None:
                continue
            if RESULT in p.params:
                raise ContractDefinitionError(
                    f"{self.name}: precondition '{p.describe()}' references "
                    f"'{RESULT}', which is only bound after the call"
                )
            self._check_names(p, p.params - declared, "precondition")
        for p in self.postconditions:
            if p.params is None:
                continue
            self._check_names(p, p.params - declared - {RESULT}, "postcondition")
        unknown = set(self.types) - declared
        if unknown:
            raise ContractDefinitionError(
                f"{self.name}: type hints for unknown parameters "
                f"{sorted(unknown)}"
            )

    def _check_names(self, predicate: Predicate, unknown, kind: str) -> None:
        if unknown:
            raise ContractDefinitionError(
                f"{self.name}: {kind} '{predicate.describe()}' references "
                f"{sorted(unknown)}, which are not parameters of "
                f"{self.name}{self.signature}"
            )

    # ------------------------------------------------------------------
    # Evaluation steps (shared with the quickcheck runner)
    # ------------------------------------------------------------------

    def bind(self, *args, **kwargs) -> Bindings:
        """Bind call arguments to parameter names, applying defaults."""
        bound = self.signature.bind(*args, **kwargs)
        bound.apply_defaults()
        return freeze_bindings(bound.arguments)

    def failing_preconditions(self, bindings: Bindings) -> List[str]:
        """Descriptions of every precondition that does not hold."""
        return [p.describe(bindings) for p in self.preconditions
                if not p(bindings)]

    def accepts(self, bindings: Bindings) -> bool:
        return not self.failing_preconditions(bindings)

    def invoke(self, bindings: Bindings) -> Any:
        """Call the wrapped function with ``bindings``, unchecked."""
        bound = inspect.BoundArguments(self.signature, dict(bindings))
        return self.fn(*bound.args, **bound.kwargs)

    def failing_postconditions(self, bindings: Bindings, result: Any) -> List[str]:
        """Descriptions of every postcondition that does not hold for ``result``."""
        with_return = with_result(bindings, result)
        return [p.describe(with_return) for p in self.postconditions
                if not p(with_return)]

    def type_for(self, name: str) -> Optional[TypeTag]:
        """
        Generation tag for a parameter.

        Explicit ``types`` win; otherwise the first precondition carrying a
        type-membership check for ``name``.
        """
        if name in self.types:
            return self.types[name]
        for p in self.preconditions:
            tag = p.hint_for(name)
            if tag is not None:
                return tag
        return None

    # ------------------------------------------------------------------
    # Enforcement
    # ------------------------------------------------------------------

    def __call__(self, *args, **kwargs) -> Any:
        bindings = self.bind(*args, **kwargs)

        failures = self.failing_preconditions(bindings)
        if failures:
            raise ValidationError(self.name, failures, bindings)

        result = self.invoke(bindings)

        failures = self.failing_postconditions(bindings, result)
        if failures:
            raise PostconditionError(self.name, failures, bindings)
        return result

    def describe(self) -> str:
        """Multi-line, human-readable rendering of the contract."""
        lines = [f"{self.name}{self.signature}"]
        for param in self.parameters:
            doc = self.docs.get(param)
            tag = self.type_for(param)
            if doc is None and tag is None:
                continue
            line = f"  {param}"
            if tag is not None:
                line += f" ({tag})"
            if doc:
                line += f": {doc}"
            lines.append(line)
        lines.append("  requires:")
        lines.extend(f"    - {p.describe()}" for p in self.preconditions)
        if not self.preconditions:
            lines.append("    (nothing)")
        lines.append("  ensures:")
        lines.extend(f"    - {p.describe()}" for p in self.postconditions)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (f"Contract({self.name}, {len(self.preconditions)} pre, "
                f"{len(self.postconditions)} post)")


def ensure(
    preconditions: Predicates,
    postconditions: Predicates,
    fn: Optional[Callable] = None,
    *,
    types: Optional[Mapping[str, TypeTag]] = None,
    docs: Optional[Mapping[str, str]] = None,
    name: Optional[str] = None,
):
    """
    Wrap ``fn`` with a contract.

    Used directly (``checked = ensure(pre, post, fn)``) or as a decorator
    when ``fn`` is omitted.  The returned callable exposes ``contract``,
    ``__wrapped__`` and a ``quickcheck(**options)`` shortcut.

    Raises:
        ContractDefinitionError: If a predicate references names that are
            not parameters of ``fn``.
    """
    def decorate(func: Callable) -> Callable:
        contract = Contract(func, preconditions, postconditions,
                            types=types, docs=docs, name=name)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            return contract(*args, **kwargs)

        def run_quickcheck(pool_size: Optional[int] = None, **options):
            from contract_harness.core.quickcheck import quickcheck
            return quickcheck(contract, pool_size, **options)

        wrapper.contract = contract
        wrapper.quickcheck = run_quickcheck
        return wrapper

    if fn is not None:
        return decorate(fn)
    return decorate
