# Copyright 2026 The contract_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Default configuration for quickcheck runs.

Defaults live in one explicit ``QuickcheckSettings`` object.  The only
ways to change them are ``set_default_settings`` and the
``settings_scope`` context manager; explicit arguments to ``quickcheck``
always win.

Example::

    with settings_scope(pool_size=500, seed=1234):
        report = quickcheck(my_function)
"""

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Optional

from contract_harness.core.strategies import (
    DEFAULT_EDGE_PROBABILITY,
    DEFAULT_MAX_DEPTH,
)


@dataclass(frozen=True)
class QuickcheckSettings:
    """Tunable parameters of a quickcheck run."""

    pool_size: int = 100
    """Raw candidates generated before precondition filtering."""

    size_bound: int = 100
    """Largest magnitude / length handed to generators (reached at the end of the pool)."""

    max_depth: int = DEFAULT_MAX_DEPTH
    """Nesting limit for composite values."""

    edge_probability: float = DEFAULT_EDGE_PROBABILITY
    """Chance of drawing the next catalog entry while entries remain."""

    seed: Optional[int] = None
    """Seed for the random source.  None draws from process entropy."""

    verbose: bool = False
    """Print ``[quickcheck]`` progress lines."""

    def __post_init__(self):
        if self.pool_size < 1:
            raise ValueError(f"pool_size must be >= 1, got {self.pool_size}")
        if self.size_bound < 0:
            raise ValueError(f"size_bound must be >= 0, got {self.size_bound}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if not 0.0 <= self.edge_probability <= 1.0:
            raise ValueError(
                f"edge_probability must be within [0, 1], "
                f"got {self.edge_probability}"
            )

    def with_changes(self, **changes) -> 'QuickcheckSettings':
        """Copy with the given fields replaced; ``None`` values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


_defaults = QuickcheckSettings()


def get_default_settings() -> QuickcheckSettings:
    """Settings used when ``quickcheck`` is not given explicit ones."""
    return _defaults


def set_default_settings(settings: QuickcheckSettings) -> QuickcheckSettings:
    """Replace the process-wide defaults.  Returns the previous defaults."""
    global _defaults
    previous = _defaults
    _defaults = settings
    return previous


@contextmanager
def settings_scope(**changes):
    """Temporarily override default settings fields."""
    previous = set_default_settings(_defaults.with_changes(**changes))
    try:
        yield _defaults
    finally:
        set_default_settings(previous)
