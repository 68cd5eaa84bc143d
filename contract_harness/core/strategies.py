# Copyright 2026 The contract_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Biased value generators keyed by TypeTag.

Every scalar kind has a ``BiasProfile``: a fixed, ordered catalog of
values that are known to break code (zero, empty text, extreme
magnitudes, ...) plus an organic sampler that draws uniformly within a
size bound.  Generated values are a mix of both.

Catalog entries are handed out in order through per-slot cursors held by
a ``GenerationSession``, so a run works through every edge case of every
parameter instead of re-rolling them.  A session is created per run;
the registry itself holds no run state.

Composite tags (``Sequence<T>``, ``Record{...}``) are built in.  Their
children are generated with half the size budget and recursion stops at
``max_depth``.

Example::

    import random
    from contract_harness.core.strategies import BiasProfile, default_registry
    from contract_harness.core.type_tags import TypeTag, sequence_of, INTEGER

    default_registry.register("Even", BiasProfile(
        catalog=(0, 2, -2),
        sample=lambda rng, size: 2 * rng.randint(-size, size),
        accepts=lambda v: isinstance(v, int) and v % 2 == 0,
    ))

    session = default_registry.session(random.Random(7))
    session.generate(sequence_of(INTEGER), size_bound=20, slot="xs")
"""

import copy
import random
import string
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from contract_harness.core.errors import ContractDefinitionError
from contract_harness.core.type_tags import (
    BOOLEAN,
    INTEGER,
    NULL,
    NUMBER,
    TEXT,
    TypeTag,
)

RandomSource = random.Random

SEQUENCE = "Sequence"
RECORD = "Record"
_COMPOSITE = (SEQUENCE, RECORD)

DEFAULT_EDGE_PROBABILITY = 0.25
DEFAULT_MAX_DEPTH = 4


@dataclass(frozen=True)
class BiasProfile:
    """Edge-case catalog, organic sampler and membership check for one kind."""

    catalog: Tuple[Any, ...]
    """Interesting fixed values, handed out in this order."""

    sample: Callable[[RandomSource, int], Any]
    """``(rng, size_bound) -> value`` drawn uniformly within the bound."""

    accepts: Callable[[Any], bool]
    """Type-membership check for values of this kind."""


# ---------------------------------------------------------------------------
# Built-in scalar profiles
# ---------------------------------------------------------------------------

_TEXT_ALPHABET = (
    string.ascii_letters + string.digits + string.punctuation + " \t\n"
    + "äéßøΩЖ漢字"
)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _sample_text(rng: RandomSource, size_bound: int) -> str:
    length = rng.randint(0, size_bound)
    return "".join(rng.choice(_TEXT_ALPHABET) for _ in range(length))


def _builtin_profiles() -> Dict[str, BiasProfile]:
    return {
        NUMBER.name: BiasProfile(
            catalog=(0.0, 1.0, -1.0, 1e308, -1e308, 5e-324, -5e-324, 1e-9),
            sample=lambda rng, size: rng.uniform(-size, size),
            accepts=_is_number,
        ),
        INTEGER.name: BiasProfile(
            catalog=(0, 1, -1, 2**31 - 1, -2**31, 2**63 - 1, -2**63),
            sample=lambda rng, size: rng.randint(-size, size),
            accepts=_is_integer,
        ),
        TEXT.name: BiasProfile(
            catalog=("", " ", "a", "\n", "\x00", "é", "\u202e", "\U0001f642"),
            sample=_sample_text,
            accepts=lambda v: isinstance(v, str),
        ),
        BOOLEAN.name: BiasProfile(
            catalog=(False, True),
            sample=lambda rng, size: rng.random() < 0.5,
            accepts=lambda v: isinstance(v, bool),
        ),
        NULL.name: BiasProfile(
            catalog=(None,),
            sample=lambda rng, size: None,
            accepts=lambda v: v is None,
        ),
    }


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class GeneratorRegistry:
    """
    Maps TypeTag names to BiasProfiles.

    Open for extension with ``register``.  ``Sequence`` and ``Record``
    are structural and cannot be replaced.
    """

    def __init__(self, profiles: Optional[Dict[str, BiasProfile]] = None):
        self._profiles: Dict[str, BiasProfile] = (
            dict(profiles) if profiles is not None else _builtin_profiles()
        )

    def register(self, name: str, profile: BiasProfile) -> None:
        """Register (or replace) the profile for a scalar tag name."""
        if name in _COMPOSITE:
            raise ContractDefinitionError(
                f"'{name}' is a built-in composite tag and cannot be replaced"
            )
        self._profiles[name] = profile

    def copy(self) -> 'GeneratorRegistry':
        """Independent registry with the same profiles."""
        return GeneratorRegistry(self._profiles)

    def profile(self, tag: TypeTag) -> BiasProfile:
        try:
            return self._profiles[tag.name]
        except KeyError:
            raise ContractDefinitionError(
                f"No generator registered for type tag '{tag}'"
            ) from None

    def knows(self, tag: TypeTag) -> bool:
        if tag.name == SEQUENCE:
            return tag.element is not None and self.knows(tag.element)
        if tag.name == RECORD:
            return all(self.knows(t) for _, t in tag.fields)
        return tag.name in self._profiles

    def matches(self, value: Any, tag: TypeTag) -> bool:
        """Whether ``value`` belongs to ``tag``."""
        if tag.name == SEQUENCE:
            return (isinstance(value, (list, tuple)) and
                    all(self.matches(v, tag.element) for v in value))
        if tag.name == RECORD:
            if not isinstance(value, dict):
                return False
            if set(value) != {k for k, _ in tag.fields}:
                return False
            return all(self.matches(value[k], t) for k, t in tag.fields)
        return self.profile(tag).accepts(value)

    def session(
        self,
        rng: RandomSource,
        edge_probability: float = DEFAULT_EDGE_PROBABILITY,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> 'GenerationSession':
        """Start a run-scoped session with fresh catalog cursors."""
        return GenerationSession(self, rng, edge_probability, max_depth)

    def generate(
        self,
        tag: TypeTag,
        size_bound: int,
        rng: RandomSource,
        session: Optional['GenerationSession'] = None,
    ) -> Any:
        """
        Produce one value of ``tag``.

        Without a ``session`` the catalog cursor starts from scratch on
        every call; pass a session to walk the catalog across calls.
        """
        if session is None:
            session = self.session(rng)
        return session.generate(tag, size_bound, slot=str(tag))


class GenerationSession:
    """
    Run-scoped generator state: the random source and the catalog cursors.

    Draw order is fully determined by the seed of ``rng`` and the order of
    ``generate`` calls.
    """

    def __init__(
        self,
        registry: GeneratorRegistry,
        rng: RandomSource,
        edge_probability: float = DEFAULT_EDGE_PROBABILITY,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.registry = registry
        self.rng = rng
        self.edge_probability = edge_probability
        self.max_depth = max_depth
        self._cursors: Dict[str, int] = {}

    def catalog_remaining(self, slot: str, tag: TypeTag) -> int:
        """Catalog entries not yet handed out for ``slot``."""
        return max(0, self._catalog_size(tag) - self._cursors.get(slot, 0))

    def generate(self, tag: TypeTag, size_bound: int, slot: str, depth: int = 0) -> Any:
        size_bound = max(0, int(size_bound))
        position = self._next_edge(slot, tag)
        if position is not None:
            return self._edge_value(tag, position, slot, size_bound, depth)
        if tag.name == SEQUENCE:
            return self._sequence(tag, size_bound, slot, depth)
        if tag.name == RECORD:
            return self._record(tag, size_bound, slot, depth)
        return self.registry.profile(tag).sample(self.rng, size_bound)

    # -- catalog ------------------------------------------------------------

    def _catalog_size(self, tag: TypeTag) -> int:
        if tag.name == SEQUENCE:
            return 2  # [] and a single element
        if tag.name == RECORD:
            return 1
        return len(self.registry.profile(tag).catalog)

    def _next_edge(self, slot: str, tag: TypeTag) -> Optional[int]:
        cursor = self._cursors.get(slot, 0)
        if cursor >= self._catalog_size(tag):
            return None
        if self.rng.random() >= self.edge_probability:
            return None
        self._cursors[slot] = cursor + 1
        return cursor

    def _edge_value(self, tag: TypeTag, position: int, slot: str,
                    size_bound: int, depth: int) -> Any:
        if tag.name == SEQUENCE:
            if position == 0 or depth >= self.max_depth:
                return []
            child = self.generate(tag.element, size_bound // 2,
                                  slot + "[]", depth + 1)
            return [child]
        if tag.name == RECORD:
            return {k: self._first_edge(t) for k, t in tag.fields}
        return copy.deepcopy(self.registry.profile(tag).catalog[position])

    def _first_edge(self, tag: TypeTag) -> Any:
        if tag.name == SEQUENCE:
            return []
        if tag.name == RECORD:
            return {k: self._first_edge(t) for k, t in tag.fields}
        catalog = self.registry.profile(tag).catalog
        if catalog:
            return copy.deepcopy(catalog[0])
        return self.registry.profile(tag).sample(self.rng, 0)

    # -- composites ---------------------------------------------------------

    def _sequence(self, tag: TypeTag, size_bound: int, slot: str, depth: int) -> list:
        if depth >= self.max_depth:
            return []
        length = self.rng.randint(0, size_bound)
        child_bound = size_bound // 2
        return [
            self.generate(tag.element, child_bound, slot + "[]", depth + 1)
            for _ in range(length)
        ]

    def _record(self, tag: TypeTag, size_bound: int, slot: str, depth: int) -> dict:
        child_bound = size_bound // 2
        return {
            k: self.generate(t, child_bound, f"{slot}.{k}", depth + 1)
            for k, t in tag.fields
        }


default_registry = GeneratorRegistry()
"""Process-wide registry used when no explicit registry is passed."""
