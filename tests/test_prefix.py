"""
Tests for the longest-match prefix search.
"""

import pytest

from conftest import NOW, utc
from dxccops.adapters.prefix import (
    get_prefix,
    is_single_char_appendix,
    is_single_digit_appendix,
)


class TestGetPrefix:
    """Test prefix search by shortening the candidate."""

    def test_full_candidate(self, query):
        """Test a candidate that is a prefix itself."""
        prefix, removed = get_prefix(query, "AB", NOW)
        assert (prefix.call, removed) == ("AB", 0)

    def test_longest_match_wins(self, query):
        """Test AB9CD matches AB9 and not the shorter AB."""
        prefix, removed = get_prefix(query, "AB9CD", NOW)
        assert (prefix.call, prefix.adif, removed) == ("AB9", 200, 2)

    def test_shorter_match(self, query):
        """Test AB1CD falls back to AB."""
        prefix, removed = get_prefix(query, "AB1CD", NOW)
        assert (prefix.call, removed) == ("AB", 3)

    def test_single_char_match(self, query):
        """Test the search goes down to a single char."""
        prefix, removed = get_prefix(query, "W1AW", NOW)
        assert (prefix.call, removed) == ("W", 3)

    def test_no_match(self, query):
        """Test None if no length matches."""
        assert get_prefix(query, "QQ1AB", NOW) is None

    def test_compound_prefix_with_appendix(self, query):
        """Test CC1AB with appendix A matches CC/A instead of CC."""
        prefix, removed = get_prefix(query, "CC1AB", NOW, ["A"])
        assert (prefix.call, prefix.adif, removed) == ("CC/A", 400, 3)

    def test_compound_prefix_needs_appendix(self, query):
        """Test CC1AB without appendix matches plain CC."""
        prefix, _ = get_prefix(query, "CC1AB", NOW)
        assert prefix.call == "CC"

    def test_multi_char_appendices_ignored(self, query):
        """Test only single letter appendices form compound prefixes."""
        prefix, _ = get_prefix(query, "CC1AB", NOW, ["AA", "1"])
        assert prefix.call == "CC"

    def test_respects_time_window(self, query):
        """Test the match depends on the timestamp."""
        assert get_prefix(query, "Y2ABC", utc(1980))[0].adif == 229
        assert get_prefix(query, "Y2ABC", utc(1995))[0].adif == 230

    def test_empty_candidate(self, query):
        """Test an empty candidate is a programming error."""
        with pytest.raises(ValueError):
            get_prefix(query, "", NOW)

    @pytest.mark.parametrize(
        "call", ["AB", "AB1CD", "AB9CD", "SV1CD", "SV9AB", "MM", "M1ABC", "W1AW", "F", "CC1AB", "Y2AB"]
    )
    def test_matches_at_least_first_char(self, query, call):
        """Test a match never removes the whole candidate."""
        _, removed = get_prefix(query, call, NOW)
        assert 0 <= removed <= len(call) - 1


class TestAppendixHelpers:
    """Test single char appendix classification."""

    def test_single_char(self):
        assert is_single_char_appendix("A")
        assert not is_single_char_appendix("9")
        assert not is_single_char_appendix("AB")

    def test_single_digit(self):
        assert is_single_digit_appendix("9")
        assert not is_single_digit_appendix("A")
        assert not is_single_digit_appendix("10")
