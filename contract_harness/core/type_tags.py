# Copyright 2026 The contract_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Type tags: the closed-but-extensible set of value kinds the harness knows
how to generate and recognise.

A tag is a plain value.  Generation and membership behaviour live in the
generator registry (:mod:`contract_harness.core.strategies`), keyed by
``TypeTag.name``, so user code can add new kinds without touching this
module::

    from contract_harness.core.type_tags import TypeTag, sequence_of, INTEGER

    POSITIVE = TypeTag.named("Positive")
    ints = sequence_of(INTEGER)
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class TypeTag:
    """Identifier used to select a generator and a membership check."""

    name: str
    """Registry key, e.g. ``"Integer"`` or ``"Sequence"``."""

    element: Optional['TypeTag'] = None
    """Element tag for sequences."""

    fields: Tuple[Tuple[str, 'TypeTag'], ...] = ()
    """Ordered ``(field_name, tag)`` pairs for records."""

    @staticmethod
    def named(name: str) -> 'TypeTag':
        """Create a scalar tag for a user-registered kind."""
        return TypeTag(name=name)

    @property
    def is_composite(self) -> bool:
        return self.element is not None or bool(self.fields)

    def __str__(self) -> str:
        if self.element is not None:
            return f"{self.name}<{self.element}>"
        if self.fields:
            inner = ", ".join(f"{k}: {v}" for k, v in self.fields)
            return f"{self.name}{{{inner}}}"
        return self.name


NUMBER = TypeTag("Number")
INTEGER = TypeTag("Integer")
TEXT = TypeTag("Text")
BOOLEAN = TypeTag("Boolean")
NULL = TypeTag("Null")


def sequence_of(element: TypeTag) -> TypeTag:
    """Tag for a list whose elements all carry ``element``."""
    return TypeTag("Sequence", element=element)


def record_of(**fields: TypeTag) -> TypeTag:
    """Tag for a dict with exactly the given keys, in keyword order."""
    return TypeTag("Record", fields=tuple(fields.items()))
