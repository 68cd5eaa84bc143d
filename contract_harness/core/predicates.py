# Copyright 2026 The contract_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Composable, self-describing predicates over a binding environment.

A ``Predicate`` pairs an evaluation function ``Bindings -> bool`` with a
description that is rendered verbatim in diagnostics.  Bindings map
parameter names to values; postconditions additionally see ``result``.

Predicates combine with ``all_of`` / ``any_of`` / ``negate`` (or the
``&`` / ``|`` / ``~`` operators) and the combined predicate still knows
how to describe itself.

Example:
    from contract_harness.core.predicates import (
        is_type, length_at_most, at_least, ref, RESULT, length_equals,
    )
    from contract_harness.core.type_tags import INTEGER

    valid_n = is_type("n", INTEGER) & at_least("n", 0)
    right_length = length_equals(RESULT, ref("n"))

    valid_n.describe()       # "n is Integer and n >= 0"
    right_length.describe()  # "length(result) == n"
"""

import operator
from types import MappingProxyType
from typing import (
    Any, Callable, FrozenSet, Iterable, Mapping, Optional, Tuple, Union,
)

from contract_harness.core import strategies
from contract_harness.core.type_tags import TypeTag, sequence_of

Bindings = Mapping[str, Any]

RESULT = "result"
"""Binding name of the wrapped function's return value."""

ITEM = "item"
"""Binding name of the current element inside ``all_satisfy``."""

Describer = Union[str, Callable[[Bindings], str]]

_EMPTY: Bindings = MappingProxyType({})


def freeze_bindings(values: Mapping[str, Any]) -> Bindings:
    """Read-only snapshot of ``values`` suitable for predicate evaluation."""
    return MappingProxyType(dict(values))


def with_result(bindings: Mapping[str, Any], result: Any) -> Bindings:
    """Extend argument bindings with the ``result`` binding."""
    values = dict(bindings)
    values[RESULT] = result
    return MappingProxyType(values)


# ---------------------------------------------------------------------------
# Predicate
# ---------------------------------------------------------------------------

class Predicate:
    """
    A named boolean check with a renderable description.

    Attributes:
        params: Binding names the predicate reads, or ``None`` when they
            cannot be known (free-form predicates built without ``params``).
        tag_hints: ``(name, TypeTag)`` pairs this predicate guarantees when
            it holds.  Used by the runner to pick generators.
    """

    def __init__(
        self,
        evaluate: Callable[[Bindings], bool],
        describe: Describer,
        params: Optional[Iterable[str]] = None,
        tag_hints: Tuple[Tuple[str, TypeTag], ...] = (),
        compound: bool = False,
    ):
        self._evaluate = evaluate
        self._describe = describe
        self.params: Optional[FrozenSet[str]] = (
            frozenset(params) if params is not None else None
        )
        self.tag_hints = tuple(tag_hints)
        self.compound = compound

    def __call__(self, bindings: Bindings) -> bool:
        return bool(self._evaluate(bindings))

    evaluate = __call__

    def describe(self, bindings: Optional[Bindings] = None) -> str:
        """
        Render the description.

        Callable describers receive ``bindings`` (an empty mapping when
        none are given) and must not assume any key is present.
        """
        if callable(self._describe):
            return self._describe(bindings if bindings is not None else _EMPTY)
        return self._describe

    @property
    def description(self) -> str:
        return self.describe()

    def hint_for(self, name: str) -> Optional[TypeTag]:
        for hinted, tag in self.tag_hints:
            if hinted == name:
                return tag
        return None

    def __and__(self, other: 'Predicate') -> 'Predicate':
        return all_of(self, other)

    def __or__(self, other: 'Predicate') -> 'Predicate':
        return any_of(self, other)

    def __invert__(self) -> 'Predicate':
        return negate(self)

    def __repr__(self) -> str:
        return f"Predicate({self.describe()!r})"


def make_predicate(
    evaluate: Callable[[Bindings], bool],
    describe: Describer,
    params: Optional[Iterable[str]] = None,
) -> Predicate:
    """
    Build a predicate from an evaluation function and a description.

    ``evaluate`` must be pure: it may read the bindings but must not
    mutate them or cause observable side effects.
    """
    return Predicate(evaluate, describe, params=params)


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------

def _merge_params(predicates: Tuple[Predicate, ...]) -> Optional[FrozenSet[str]]:
    names = set()
    for p in predicates:
        if p.params is None:
            return None
        names |= p.params
    return frozenset(names)


def _joined(predicates: Tuple[Predicate, ...], connective: str) -> Describer:
    def describe(bindings: Bindings) -> str:
        parts = []
        for p in predicates:
            text = p.describe(bindings)
            parts.append(f"({text})" if p.compound else text)
        return f" {connective} ".join(parts)
    return describe


def all_of(*predicates: Predicate) -> Predicate:
    """
    All predicates must hold.

    Every child is evaluated, even after one has failed.
    """
    def check(bindings):
        outcomes = [p(bindings) for p in predicates]
        return all(outcomes)

    hints = tuple(h for p in predicates for h in p.tag_hints)
    return Predicate(check, _joined(predicates, "and"),
                     params=_merge_params(predicates),
                     tag_hints=hints, compound=len(predicates) > 1)


def any_of(*predicates: Predicate) -> Predicate:
    """At least one predicate must hold."""
    def check(bindings):
        return any(p(bindings) for p in predicates)

    return Predicate(check, _joined(predicates, "or"),
                     params=_merge_params(predicates),
                     compound=len(predicates) > 1)


def negate(predicate: Predicate) -> Predicate:
    """Invert a predicate."""
    def check(bindings):
        return not predicate(bindings)

    def describe(bindings):
        return f"not ({predicate.describe(bindings)})"

    return Predicate(check, describe, params=predicate.params)


# ---------------------------------------------------------------------------
# Binding references
# ---------------------------------------------------------------------------

class Ref:
    """Reference to another binding, used as the right-hand side of a comparison."""

    def __init__(self, name: str):
        self.name = name

    def resolve(self, bindings: Bindings) -> Any:
        return bindings[self.name]

    def __repr__(self) -> str:
        return self.name


def ref(name: str) -> Ref:
    """Compare against the value bound to ``name`` instead of a constant."""
    return Ref(name)


def _operand(value: Any, bindings: Bindings) -> Any:
    return value.resolve(bindings) if isinstance(value, Ref) else value


def _operand_names(name: str, other: Any) -> Tuple[str, ...]:
    return (name, other.name) if isinstance(other, Ref) else (name,)


# ---------------------------------------------------------------------------
# Standard predicates
# ---------------------------------------------------------------------------

def is_type(name: str, tag: TypeTag, registry=None) -> Predicate:
    """The value bound to ``name`` belongs to ``tag``."""
    def check(bindings):
        return (registry or strategies.default_registry).matches(bindings[name], tag)

    return Predicate(check, f"{name} is {tag}", params=(name,),
                     tag_hints=((name, tag),))


def all_satisfy(
    name: str,
    element_check: Union[Predicate, Callable[[Any], bool]],
    description: Optional[str] = None,
) -> Predicate:
    """
    Every element of the sequence bound to ``name`` satisfies a check.

    ``element_check`` is either a Predicate over the ``item`` binding, or
    a plain callable taking the element (then ``description`` is used).
    Values that are not sequences fail the check.
    """
    if isinstance(element_check, Predicate):
        inner = element_check.describe()
        item_ok = lambda value: element_check(MappingProxyType({ITEM: value}))
        item_tag = element_check.hint_for(ITEM)
    else:
        inner = description or getattr(element_check, '__name__', 'check')
        item_ok = element_check
        item_tag = None

    def check(bindings):
        value = bindings[name]
        if not isinstance(value, (list, tuple)):
            return False
        return all(item_ok(v) for v in value)

    hints = ((name, sequence_of(item_tag)),) if item_tag is not None else ()
    return Predicate(check, f"every element of {name} satisfies ({inner})",
                     params=(name,), tag_hints=hints)


def _comparison(name: str, symbol: str, op: Callable, other: Any,
                measure: Optional[Callable] = None,
                label: Optional[str] = None) -> Predicate:
    def check(bindings):
        left = bindings[name]
        try:
            if measure is not None:
                left = measure(left)
            return bool(op(left, _operand(other, bindings)))
        except TypeError:
            # Ill-typed operands (len() of a number, str < int) never satisfy
            return False

    subject = label or name
    return Predicate(check, f"{subject} {symbol} {other!r}",
                     params=_operand_names(name, other))


def equals(name: str, other: Any) -> Predicate:
    return _comparison(name, "==", operator.eq, other)


def not_equals(name: str, other: Any) -> Predicate:
    return _comparison(name, "!=", operator.ne, other)


def greater_than(name: str, other: Any) -> Predicate:
    return _comparison(name, ">", operator.gt, other)


def at_least(name: str, other: Any) -> Predicate:
    return _comparison(name, ">=", operator.ge, other)


def less_than(name: str, other: Any) -> Predicate:
    return _comparison(name, "<", operator.lt, other)


def at_most(name: str, other: Any) -> Predicate:
    return _comparison(name, "<=", operator.le, other)


def length_equals(name: str, other: Any) -> Predicate:
    """``len(value) == other``; values without a length fail."""
    return _comparison(name, "==", operator.eq, other,
                       measure=len, label=f"length({name})")


def length_at_least(name: str, other: Any) -> Predicate:
    return _comparison(name, ">=", operator.ge, other,
                       measure=len, label=f"length({name})")


def length_at_most(name: str, other: Any) -> Predicate:
    return _comparison(name, "<=", operator.le, other,
                       measure=len, label=f"length({name})")


def check(fn: Callable[..., bool], description: str, *names: str) -> Predicate:
    """
    Free-form predicate: ``fn`` receives the values bound to ``names``.

    Example::

        check(lambda x, result: result == list(reversed(x)),
              "result is x reversed", "x", RESULT)
    """
    def evaluate(bindings):
        return fn(*(bindings[n] for n in names))

    return Predicate(evaluate, description, params=names)
