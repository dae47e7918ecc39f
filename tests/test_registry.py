"""Tests for fieldcheck.registry — RuleRegistry snapshot and compilation."""

import logging
from collections.abc import Mapping

import pytest

from fieldcheck import RuleRegistry


def rule_a(value: str) -> list[str]:
    return ["a"]


def rule_b(value: str) -> list[str]:
    return ["b"]


class TestRuleRegistry:
    def test_is_mapping(self) -> None:
        registry = RuleRegistry({"a": rule_a})
        assert isinstance(registry, Mapping)
        assert registry["a"] is rule_a
        assert registry.get("missing") is None

    def test_empty(self) -> None:
        registry = RuleRegistry()
        assert len(registry) == 0
        assert registry.fields == ()

    def test_fields_in_registration_order(self) -> None:
        registry = RuleRegistry({"b": rule_b, "a": rule_a})
        assert registry.fields == ("b", "a")
        assert list(registry) == ["b", "a"]

    def test_contains(self) -> None:
        registry = RuleRegistry({"a": rule_a})
        assert "a" in registry
        assert "b" not in registry

    def test_snapshot_isolated_from_source(self) -> None:
        source = {"a": rule_a}
        registry = RuleRegistry(source)
        source["a"] = rule_b
        source["b"] = rule_b
        assert registry["a"] is rule_a
        assert "b" not in registry

    def test_read_only(self) -> None:
        registry = RuleRegistry({"a": rule_a})
        with pytest.raises(TypeError):
            registry["a"] = rule_b  # type: ignore[index]

    def test_list_value_combined(self) -> None:
        registry = RuleRegistry({"ab": [rule_a, rule_b]})
        assert registry["ab"]("x") == ["a", "b"]

    def test_tuple_value_combined(self) -> None:
        registry = RuleRegistry({"ab": (rule_b, rule_a)})
        assert registry["ab"]("x") == ["b", "a"]

    def test_copy_from_registry_shares_table(self) -> None:
        original = RuleRegistry({"a": rule_a})
        copy = RuleRegistry(original)
        assert copy == original
        assert copy["a"] is rule_a

    def test_repr(self) -> None:
        assert repr(RuleRegistry({"a": rule_a})) == "RuleRegistry(fields=['a'])"

    def test_compile_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="fieldcheck"):
            RuleRegistry({"a": rule_a, "b": rule_b})
        assert any("2 field(s)" in r.getMessage() for r in caplog.records)
