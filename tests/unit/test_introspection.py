"""Unit tests for predicate discovery."""

import math
import types

from adaptquad.introspection import find_predicates, true_predicates


class TestFindPredicates:

    def test_math_predicates(self):
        found = find_predicates(math)
        for name in ("isclose", "isfinite", "isinf", "isnan"):
            assert name in found
            assert found[name] is getattr(math, name)

    def test_sorted_by_name(self):
        names = list(find_predicates(math))
        assert names == sorted(names)

    def test_builtins_default(self):
        found = find_predicates()
        assert "isinstance" in found
        assert "issubclass" in found

    def test_mapping_namespace_skips_private_and_non_callables(self):
        namespace = {
            "is_even": lambda n: n % 2 == 0,
            "is_flag": True,
            "_is_hidden": lambda n: True,
            "other": lambda n: True,
        }
        assert list(find_predicates(namespace, prefix="is_")) == ["is_even"]

    def test_module_namespace(self):
        module = types.SimpleNamespace(is_positive=lambda x: x > 0, double=lambda x: 2 * x)
        assert list(find_predicates(module, prefix="is_")) == ["is_positive"]


class TestTruePredicates:

    def test_finite(self):
        assert true_predicates(1.0, math) == ["isfinite"]

    def test_infinite(self):
        assert true_predicates(math.inf, math) == ["isinf"]

    def test_nan(self):
        assert true_predicates(math.nan, math) == ["isnan"]

    def test_skips_predicates_that_reject_value(self):
        namespace = {
            "is_even": lambda n: n % 2 == 0,
            "is_long": lambda s: len(s) > 3,
        }
        assert true_predicates(4, namespace, prefix="is_") == ["is_even"]
