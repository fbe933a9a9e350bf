"""Unit tests for funseq.operators.builtin: the default operator set."""
from __future__ import annotations

import pytest

from funseq.core import FunctionalSequence
from funseq.operators import OperatorKind, default_registry


class TestDefaultRegistry:
    def test_expected_names(self) -> None:
        assert set(default_registry.list_operators()) >= {
            "multiply",
            "add_constant",
            "negate",
            "identity",
            "greater_than",
            "less_than",
            "equals",
            "is_even",
            "is_odd",
            "add",
            "product",
            "maximum",
            "minimum",
        }

    def test_every_builtin_has_description(self) -> None:
        assert all(spec.description for spec in default_registry)

    @pytest.mark.parametrize(
        ("name", "kind"),
        [
            ("multiply", OperatorKind.MAP),
            ("greater_than", OperatorKind.FILTER),
            ("add", OperatorKind.REDUCE),
        ],
    )
    def test_kinds(self, name: str, kind: OperatorKind) -> None:
        assert default_registry.get(name).kind is kind


class TestMapOperators:
    def test_multiply(self) -> None:
        assert default_registry.build("multiply", 3)(10) == 30

    def test_add_constant(self) -> None:
        assert default_registry.build("add_constant", -5)(10) == 5

    def test_negate(self) -> None:
        assert default_registry.build("negate")(4) == -4

    def test_identity(self) -> None:
        marker = object()
        assert default_registry.build("identity")(marker) is marker


class TestFilterOperators:
    def test_greater_than_is_strict(self) -> None:
        keep = default_registry.build("greater_than", 100)
        assert keep(101)
        assert not keep(100)

    def test_less_than_is_strict(self) -> None:
        keep = default_registry.build("less_than", 0)
        assert keep(-1)
        assert not keep(0)

    def test_equals(self) -> None:
        assert default_registry.build("equals", "a")("a")

    def test_parity(self) -> None:
        seq = FunctionalSequence(range(6))
        assert seq.filter(default_registry.build("is_even")) == [0, 2, 4]
        assert seq.filter(default_registry.build("is_odd")) == [1, 3, 5]


class TestReduceOperators:
    def test_add(self) -> None:
        assert FunctionalSequence([120, 150]).reduce(default_registry.build("add"), 0) == 270

    def test_product(self) -> None:
        assert FunctionalSequence([2, 3, 4]).reduce(default_registry.build("product"), 1) == 24

    def test_maximum_and_minimum(self) -> None:
        seq = FunctionalSequence([4, 9, 1, 7])
        assert seq.reduce(default_registry.build("maximum")) == 9
        assert seq.reduce(default_registry.build("minimum")) == 1
