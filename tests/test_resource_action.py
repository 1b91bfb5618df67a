"""Tests for resource/action decomposition and the two generalization rules."""

from __future__ import annotations

import pytest

from rolecalc.core.models import PLAIN, ResourceAction
from rolecalc.core.resource_action import ResourceActionResolver
from rolecalc.exceptions import ConfigurationError

SEPARATORS = [":", "_", ".", "|"]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestSeparatorValidation:
    @pytest.mark.parametrize("sep", ["", "ab", "::"])
    def test_rejects_non_single_character(self, sep):
        with pytest.raises(ConfigurationError, match="single character"):
            ResourceActionResolver(enabled=True, separator=sep)

    def test_defaults_to_colon(self):
        assert ResourceActionResolver().separator == ":"

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            ResourceActionResolver(separator="ab")


# ---------------------------------------------------------------------------
# decompose
# ---------------------------------------------------------------------------


class TestDecompose:
    def test_disabled_mode_never_decomposes(self):
        resolver = ResourceActionResolver(enabled=False)
        assert resolver.decompose("foo:bar") == PLAIN
        assert not resolver.decompose("foo:bar").is_compound

    @pytest.mark.parametrize("sep", SEPARATORS)
    def test_compound_role(self, sep):
        resolver = ResourceActionResolver(enabled=True, separator=sep)
        assert resolver.decompose(f"foo{sep}bar") == ResourceAction("foo", "bar")

    @pytest.mark.parametrize("sep", SEPARATORS)
    def test_non_matching_patterns_are_plain(self, sep):
        resolver = ResourceActionResolver(enabled=True, separator=sep)
        for pattern in [
            f"{sep}foo",
            sep,
            "baz",
            f"{sep}foo{sep}bar",
            f"foo{sep}bar{sep}",
            f"foo{sep}bar{sep}baz",
            f"foo{sep}",
        ]:
            assert resolver.decompose(pattern) == PLAIN

    def test_regex_metacharacter_separator_is_literal(self):
        resolver = ResourceActionResolver(enabled=True, separator=".")
        assert resolver.decompose("fooXbar") == PLAIN
        assert resolver.decompose("foo.bar") == ResourceAction("foo", "bar")

    def test_compose(self):
        resolver = ResourceActionResolver(enabled=True, separator="_")
        assert resolver.compose("foo", "read") == "foo_read"


# ---------------------------------------------------------------------------
# generalize
# ---------------------------------------------------------------------------


class TestGeneralize:
    @pytest.mark.parametrize("sep", SEPARATORS)
    def test_resource_generalizes_any_action(self, sep):
        resolver = ResourceActionResolver(enabled=True, write_extends_read=True, separator=sep)
        assert resolver.generalize(f"foo{sep}bar") == {"foo"}

    @pytest.mark.parametrize("sep", SEPARATORS)
    def test_read_generalizes_to_write_when_enabled(self, sep):
        resolver = ResourceActionResolver(enabled=True, write_extends_read=True, separator=sep)
        assert resolver.generalize(f"foo{sep}read") == {"foo", f"foo{sep}write"}

    def test_read_does_not_generalize_to_write_when_disabled(self):
        resolver = ResourceActionResolver(enabled=True, write_extends_read=False)
        assert resolver.generalize("foo:read") == {"foo"}

    def test_write_only_generalizes_to_resource(self):
        resolver = ResourceActionResolver(enabled=True, write_extends_read=True)
        assert resolver.generalize("foo:write") == {"foo"}

    def test_plain_role_has_no_generalizations(self):
        resolver = ResourceActionResolver(enabled=True, write_extends_read=True)
        assert resolver.generalize("foo") == set()

    def test_disabled_mode_has_no_generalizations(self):
        resolver = ResourceActionResolver(enabled=False, write_extends_read=True)
        assert resolver.generalize("foo:read") == set()
