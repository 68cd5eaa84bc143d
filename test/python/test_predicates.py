#!/usr/bin/env python3
# Copyright 2026 The contract_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the predicate engine."""

import pytest

from contract_harness.core.predicates import (
    ITEM,
    RESULT,
    Predicate,
    all_of,
    all_satisfy,
    any_of,
    at_least,
    at_most,
    check,
    equals,
    freeze_bindings,
    greater_than,
    is_type,
    length_at_least,
    length_at_most,
    length_equals,
    less_than,
    make_predicate,
    negate,
    not_equals,
    ref,
    with_result,
)
from contract_harness.core.type_tags import (
    BOOLEAN,
    INTEGER,
    NULL,
    NUMBER,
    TEXT,
    record_of,
    sequence_of,
)


def b(**values):
    """Shorthand for read-only bindings."""
    return freeze_bindings(values)


class TestMakePredicate:
    """Tests for the basic Predicate constructor."""

    def test_fixed_description(self):
        p = make_predicate(lambda env: env["x"] > 1, "x is big")
        assert p(b(x=2)) is True
        assert p(b(x=0)) is False
        assert p.describe() == "x is big"
        assert p.description == "x is big"

    def test_interpolated_description(self):
        p = make_predicate(
            lambda env: env["x"] > 1,
            lambda env: f"x > 1 (x was {env.get('x', '?')})",
        )
        assert p.describe(b(x=0)) == "x > 1 (x was 0)"
        assert p.describe() == "x > 1 (x was ?)"

    def test_truthy_results_are_coerced_to_bool(self):
        p = make_predicate(lambda env: env["xs"], "xs is non-empty")
        assert p(b(xs=[1])) is True
        assert p(b(xs=[])) is False

    def test_params_unknown_by_default(self):
        assert make_predicate(lambda env: True, "always").params is None
        p = make_predicate(lambda env: True, "always", params=["x"])
        assert p.params == frozenset({"x"})

    def test_repr_shows_description(self):
        assert repr(equals("x", 1)) == "Predicate('x == 1')"


class TestBindings:
    """Tests for the binding environment."""

    def test_bindings_are_read_only(self):
        env = b(x=1)
        with pytest.raises(TypeError):
            env["x"] = 2

    def test_with_result_adds_result_without_touching_original(self):
        env = b(x=1)
        extended = with_result(env, "out")
        assert extended[RESULT] == "out"
        assert RESULT not in env


class TestCombinators:
    """Tests for all_of / any_of / negate and the operator forms."""

    def test_and_description(self):
        p = is_type("n", INTEGER) & at_least("n", 0)
        assert p.describe() == "n is Integer and n >= 0"

    def test_nested_descriptions_are_parenthesised(self):
        p = any_of(all_of(greater_than("x", 0), less_than("x", 10)), equals("x", -1))
        assert p.describe() == "(x > 0 and x < 10) or x == -1"

    def test_negate(self):
        p = ~greater_than("x", 0)
        assert p.describe() == "not (x > 0)"
        assert p(b(x=-3)) is True
        assert p(b(x=3)) is False

    def test_all_of_evaluates_every_child(self):
        seen = []

        def recording(label, outcome):
            def evaluate(env):
                seen.append(label)
                return outcome
            return make_predicate(evaluate, label)

        p = all_of(recording("a", False), recording("b", False), recording("c", True))
        assert p(b()) is False
        assert seen == ["a", "b", "c"]

    def test_or(self):
        p = equals("x", 1) | equals("x", 2)
        assert p(b(x=2)) is True
        assert p(b(x=3)) is False
        assert p.describe() == "x == 1 or x == 2"

    def test_params_are_merged(self):
        p = equals("a", 1) & less_than("b", ref("c"))
        assert p.params == frozenset({"a", "b", "c"})

    def test_unknown_params_propagate(self):
        p = equals("a", 1) & make_predicate(lambda env: True, "free")
        assert p.params is None

    def test_type_hints_flow_through_and_not_or(self):
        both = is_type("x", TEXT) & length_at_most("x", 3)
        either = is_type("x", TEXT) | is_type("x", NULL)
        assert both.hint_for("x") == TEXT
        assert either.hint_for("x") is None


class TestStandardPredicates:
    """Tests for the standard predicate family."""

    @pytest.mark.parametrize("tag,value,expected", [
        (INTEGER, 3, True),
        (INTEGER, True, False),
        (INTEGER, 3.0, False),
        (NUMBER, 3, True),
        (NUMBER, 2.5, True),
        (NUMBER, "2", False),
        (TEXT, "", True),
        (BOOLEAN, False, True),
        (BOOLEAN, 0, False),
        (NULL, None, True),
        (sequence_of(INTEGER), [1, 2], True),
        (sequence_of(INTEGER), [1, "a"], False),
        (record_of(a=INTEGER), {"a": 1}, True),
        (record_of(a=INTEGER), {"a": 1, "b": 2}, False),
    ])
    def test_is_type(self, tag, value, expected):
        assert is_type("v", tag)(b(v=value)) is expected

    def test_is_type_description_and_hint(self):
        p = is_type("xs", sequence_of(INTEGER))
        assert p.describe() == "xs is Sequence<Integer>"
        assert p.hint_for("xs") == sequence_of(INTEGER)
        assert p.params == frozenset({"xs"})

    @pytest.mark.parametrize("factory,symbol,value,expected", [
        (equals, "==", 5, True),
        (not_equals, "!=", 5, False),
        (greater_than, ">", 4, True),
        (at_least, ">=", 5, True),
        (less_than, "<", 5, False),
        (at_most, "<=", 6, True),
    ])
    def test_comparisons(self, factory, symbol, value, expected):
        p = factory("x", value)
        assert p(b(x=5)) is expected
        assert p.describe() == f"x {symbol} {value}"

    def test_comparison_against_text_constant(self):
        assert equals("s", "a").describe() == "s == 'a'"

    def test_ill_typed_comparison_is_false(self):
        assert less_than("x", 3)(b(x="text")) is False

    def test_comparison_with_reference(self):
        p = less_than("lo", ref("hi"))
        assert p(b(lo=1, hi=2)) is True
        assert p(b(lo=3, hi=2)) is False
        assert p.describe() == "lo < hi"
        assert p.params == frozenset({"lo", "hi"})

    def test_length_predicates(self):
        assert length_equals("xs", 2)(b(xs=[1, 2])) is True
        assert length_at_least("xs", 3)(b(xs=[1, 2])) is False
        assert length_at_most("s", 3)(b(s="abc")) is True
        assert length_equals(RESULT, ref("n")).describe() == "length(result) == n"

    def test_length_of_value_without_length_is_false(self):
        assert length_equals("xs", 1)(b(xs=5)) is False

    def test_all_satisfy_with_predicate(self):
        p = all_satisfy("xs", greater_than(ITEM, 0))
        assert p(b(xs=[1, 2, 3])) is True
        assert p(b(xs=[1, -2])) is False
        assert p(b(xs=[])) is True
        assert p(b(xs=7)) is False
        assert p.describe() == "every element of xs satisfies (item > 0)"

    def test_all_satisfy_with_callable(self):
        p = all_satisfy("words", str.islower, "is lower case")
        assert p(b(words=["ab", "cd"])) is True
        assert p(b(words=["ab", "Cd"])) is False
        assert p.describe() == "every element of words satisfies (is lower case)"

    def test_all_satisfy_type_hint(self):
        p = all_satisfy("xs", is_type(ITEM, NUMBER))
        assert p.hint_for("xs") == sequence_of(NUMBER)

    def test_free_form_check(self):
        p = check(lambda x, result: result == x[::-1], "result is x reversed",
                  "x", RESULT)
        assert p(b(x=[1, 2], result=[2, 1])) is True
        assert p(b(x=[1, 2], result=[1, 2])) is False
        assert p.params == frozenset({"x", RESULT})

    def test_evaluation_does_not_mutate_bindings(self):
        values = {"xs": [3, 1, 2]}
        env = freeze_bindings(values)
        p = all_satisfy("xs", is_type(ITEM, INTEGER)) & length_equals("xs", 3)
        assert isinstance(p, Predicate)
        p(env)
        assert dict(env) == {"xs": [3, 1, 2]}
