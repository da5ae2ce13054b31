"""Tests for dbug.matcher — enable/skip precedence."""

import pytest

from dbug.matcher import is_enabled
from dbug.patterns import PatternSet, parse_patterns


NAMES = ["label", "label:sub", "labelx", "other", "a:b:c", "x"]


class TestNothingEnabled:
    """Empty enable list never matches."""

    @pytest.mark.parametrize("name", NAMES)
    def test_empty_set(self, name):
        """No patterns at all."""
        assert is_enabled(PatternSet.empty(), name) is False

    @pytest.mark.parametrize("name", NAMES)
    def test_skip_only(self, name):
        """Skip rules alone enable nothing."""
        assert is_enabled(parse_patterns("-label,-other*"), name) is False


class TestEnableRules:
    """Literal, prefix and wildcard enable rules."""

    @pytest.mark.parametrize("name", NAMES)
    def test_star_enables_everything(self, name):
        """'*' enables every namespace."""
        assert is_enabled(parse_patterns("*"), name) is True

    def test_literal_is_exact(self):
        """'label' enables only 'label'."""
        ps = parse_patterns("label")
        assert is_enabled(ps, "label") is True
        assert is_enabled(ps, "label:sub") is False
        assert is_enabled(ps, "labelx") is False
        assert is_enabled(ps, "xlabel") is False

    def test_prefix_semantics_not_substring(self):
        """'label*' matches by prefix, so 'labelx' is included."""
        ps = parse_patterns("label*")
        assert is_enabled(ps, "label") is True
        assert is_enabled(ps, "label:sub") is True
        assert is_enabled(ps, "labelx") is True
        assert is_enabled(ps, "my:label") is False

    def test_any_enable_rule_suffices(self):
        """Multiple enable rules are OR-ed."""
        ps = parse_patterns("a,b*")
        assert is_enabled(ps, "a") is True
        assert is_enabled(ps, "b:c") is True
        assert is_enabled(ps, "c") is False


class TestSkipPrecedence:
    """Skip rules always override enable rules."""

    def test_star_minus_label(self):
        """'*,-label' disables only 'label'."""
        ps = parse_patterns("*,-label")
        assert is_enabled(ps, "label") is False
        assert is_enabled(ps, "other") is True
        assert is_enabled(ps, "label:sub") is True

    def test_order_independent(self):
        """Putting the skip first gives the same answers."""
        forward = parse_patterns("*,-label")
        backward = parse_patterns("-label,*")
        for name in NAMES:
            assert is_enabled(forward, name) == is_enabled(backward, name)

    def test_skip_prefix(self):
        """'*,-label*' disables the whole subtree."""
        ps = parse_patterns("*,-label*")
        assert is_enabled(ps, "label:sub") is False
        assert is_enabled(ps, "label") is False
        assert is_enabled(ps, "other") is True

    def test_skip_beats_exact_enable(self):
        """Skip wins even against an exact enable of the same name."""
        ps = parse_patterns("label,-label")
        assert is_enabled(ps, "label") is False

    def test_child_enabled_under_skipped_parent(self):
        """Skipping a literal parent leaves children alone."""
        ps = parse_patterns("label*,-label")
        assert is_enabled(ps, "label") is False
        assert is_enabled(ps, "label:sub") is True


class TestMemoization:
    """is_enabled is cached per (patterns, name)."""

    def test_cache_hits(self):
        """Repeated queries are served from the cache."""
        ps = parse_patterns("a*")
        is_enabled(ps, "a:b")
        before = is_enabled.cache_info().hits
        is_enabled(ps, "a:b")
        assert is_enabled.cache_info().hits == before + 1

    def test_equal_sets_share_entries(self):
        """Separately parsed but equal sets give identical answers."""
        assert is_enabled(parse_patterns("a*"), "ab") is is_enabled(parse_patterns("a*"), "ab")
