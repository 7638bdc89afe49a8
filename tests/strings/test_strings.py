"""Tests for the Strings collection."""

from unittest.mock import patch

import pytest

from stringpie import Strings, prefix, to_upper


class TestStrings:
    """Tests for the chained Strings surface."""

    def test_chained_operations(self):
        """Tests that sequence-returning methods chain into a final value."""
        names = Strings(elements=["Bob", "Sally", "John", "Jane"])

        assert names.without(prefix("J")).transform(to_upper()).last() == "SALLY"

    @pytest.mark.parametrize(
        "values,looking_for,expected",
        [
            ((), "", False),
            (("a", "b", "c"), "b", True),
            (("a", "b", "c"), "B", False),
            (("a", "", ""), "", True),
        ],
    )
    def test_contains(self, values, looking_for, expected):
        assert Strings.of(*values).contains(looking_for) is expected
        assert (looking_for in Strings.of(*values)) is expected

    def test_only_and_without(self):
        """Tests that filtering returns new Strings collections."""
        ss = Strings.of("a", "b", "c")

        only = ss.only(lambda s: s != "b")
        without = ss.without(lambda s: s != "b")

        assert isinstance(only, Strings)
        assert isinstance(without, Strings)
        assert only == ["a", "c"]
        assert without == Strings.of("b")
        assert ss == ["a", "b", "c"]

    def test_filter_with_no_matches_is_empty(self):
        result = Strings.of("a", "b").only(lambda s: False)

        assert result == Strings.empty()
        assert len(result) == 0
        assert not result

    def test_transform(self):
        assert Strings.of("a", "b", "c").transform(str.upper) == ["A", "B", "C"]
        assert Strings.empty().transform(str.upper) == []

    def test_first_and_last(self):
        ss = Strings.of("a", "b", "c")

        assert ss.first() == "a"
        assert ss.last() == "c"
        assert ss.first_or("x") == "a"
        assert ss.last_or("x") == "c"

    def test_first_and_last_defaults_on_empty(self):
        """Tests that an empty collection falls back to the defaults."""
        ss = Strings.empty()

        assert ss.first() == ""
        assert ss.last() == ""
        assert ss.first_or("default1") == "default1"
        assert ss.last_or("default2") == "default2"

    def test_stats(self):
        ss = Strings.of("bar", "Baz", "qux", "foo")

        assert ss.min() == "Baz"
        assert ss.max() == "qux"
        assert ss.len() == 4
        assert len(ss) == 4

    def test_stats_on_empty(self):
        ss = Strings.empty()

        assert ss.min() == ""
        assert ss.max() == ""
        assert ss.len() == 0

    def test_sequence_protocol(self):
        """Tests iteration, indexing and slicing."""
        ss = Strings.of("a", "b", "c")

        assert list(ss) == ["a", "b", "c"]
        assert ss[1] == "b"
        assert ss[-1] == "c"
        assert ss[1:] == Strings.of("b", "c")
        assert isinstance(ss[1:], Strings)
        assert ss.to_list() == ["a", "b", "c"]

    def test_equality(self):
        assert Strings.of("a") == Strings.of("a")
        assert Strings.of("a") == ("a",)
        assert Strings.of("a") != Strings.of("b")
        assert Strings.of("a") != "a"

    def test_repr(self):
        assert repr(Strings.of("a", "b")) == "Strings(['a', 'b'])"

    def test_of_copies_its_arguments(self):
        values = ["a", "b"]
        ss = Strings.of(*values)
        values.append("c")

        assert ss == ["a", "b"]

    def test_free_functions_accept_strings(self):
        """Tests that a Strings collection can be passed to the free functions."""
        from stringpie import strings_first, strings_max, strings_only

        ss = Strings.of("b", "a")

        assert strings_first(ss) == "b"
        assert strings_max(ss) == "b"
        assert strings_only(ss, lambda s: s == "a") == ["a"]

    @patch("stringpie.strings.strings.strings_only")
    def test_only_delegates_to_free_function(self, mock_only):
        """Tests that the method surface reuses the free function."""
        mock_only.return_value = ["a"]
        ss = Strings.of("a", "b")

        def condition(s: str) -> bool:
            return s == "a"

        result = ss.only(condition)

        mock_only.assert_called_once_with(ss.elements, condition)
        assert result == ["a"]

    @patch("stringpie.strings.strings.strings_min")
    def test_min_delegates_to_free_function(self, mock_min):
        mock_min.return_value = "z"

        assert Strings.of("a").min() == "z"
        mock_min.assert_called_once()
