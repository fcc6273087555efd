import math
import sys

import pytest

from argstore import ArgStore


class TestIntQueries:
    """Test suite for ArgStore.get_int."""

    def test_bare_form(self):
        store = ArgStore(["prog", "--count", "42"])
        assert store.get_int("-c|--count") == 42

    def test_equals_form(self):
        store = ArgStore(["prog", "--count=42"])
        assert store.get_int("-c|--count") == 42

    def test_short_alias(self):
        store = ArgStore(["prog", "-c", "7"])
        assert store.get_int("-c|--count") == 7

    def test_absent_flag_is_zero(self):
        store = ArgStore(["prog", "--other", "3"])
        assert store.get_int("--count") == 0

    def test_bare_flag_without_value(self):
        store = ArgStore(["prog", "--count"])
        assert store.get_int("--count") == 0

    def test_negative_bare_value_is_skipped(self):
        """Test that a value starting with '-' is not captured in bare form."""
        store = ArgStore(["prog", "--count", "-5"])
        assert store.get_int("--count") == 0

    def test_negative_equals_value(self):
        store = ArgStore(["prog", "--count=-5"])
        assert store.get_int("--count") == -5

    def test_bare_value_with_trailing_text(self):
        store = ArgStore(["prog", "--port", "8080abc"])
        assert store.get_int("--port") == 8080

    def test_malformed_equals_value_is_zero(self):
        store = ArgStore(["prog", "--count=abc"])
        assert store.get_int("--count") == 0

    def test_equals_value_numeric_prefix(self):
        store = ArgStore(["prog", "--count=  12xyz"])
        assert store.get_int("--count") == 12

    def test_non_numeric_bare_value_keeps_previous(self):
        store = ArgStore(["prog", "--count", "3", "--count", "many"])
        assert store.get_int("--count") == 3

    def test_last_occurrence_wins(self):
        store = ArgStore(["prog", "--count", "1", "--count", "2"])
        assert store.get_int("--count") == 2

    def test_equals_form_after_bare_form_wins(self):
        store = ArgStore(["prog", "--count", "1", "--count=2"])
        assert store.get_int("--count") == 2

    def test_later_alias_overrides_earlier(self):
        """Test that every alias is scanned and the last match is kept."""
        store = ArgStore(["prog", "--count", "9", "-c", "1"])
        assert store.get_int("--count|-c") == 1
        assert store.get_int("-c|--count") == 9

    def test_malformed_later_match_resets_to_zero(self):
        store = ArgStore(["prog", "--count=5", "--count=oops"])
        assert store.get_int("--count") == 0

    def test_repeated_queries_agree(self):
        store = ArgStore(["prog", "--count", "3", "-c=4"])
        assert store.get_int("--count|-c") == store.get_int("--count|-c") == 4

    @pytest.mark.parametrize(
        "argv",
        [
            ["prog", "--count=" + "1" * 5000],
            ["prog", "--count", "9" * 5000],
        ],
    )
    def test_oversized_value_does_not_raise(self, argv):
        """Test that a digit run too long for int() degrades instead of raising."""
        store = ArgStore(argv)
        value = store.get_int("--count")
        assert isinstance(value, int)
        limit = getattr(sys, "get_int_max_str_digits", lambda: 0)()
        if limit:
            assert value == 0


class TestFloatQueries:
    """Test suite for ArgStore.get_float."""

    def test_bare_form(self):
        store = ArgStore(["prog", "--pi", "3.14159"])
        assert store.get_float("--pi") == pytest.approx(3.14159)

    def test_equals_form(self):
        store = ArgStore(["prog", "-f=2.5"])
        assert store.get_float("-f|--float") == 2.5

    def test_absent_flag_is_zero(self):
        store = ArgStore(["prog"])
        assert store.get_float("--pi") == 0.0

    def test_leading_dot_is_not_captured_in_bare_form(self):
        store = ArgStore(["prog", "--ratio", ".5"])
        assert store.get_float("--ratio") == 0.0

    def test_leading_dot_in_equals_form(self):
        store = ArgStore(["prog", "--ratio=.5"])
        assert store.get_float("--ratio") == 0.5

    def test_exponent(self):
        store = ArgStore(["prog", "--eps", "1e-3"])
        assert store.get_float("--eps") == pytest.approx(0.001)

    def test_numeric_prefix(self):
        store = ArgStore(["prog", "--eps=2.5kg"])
        assert store.get_float("--eps") == 2.5

    def test_infinity(self):
        store = ArgStore(["prog", "--limit=inf"])
        assert math.isinf(store.get_float("--limit"))

    def test_malformed_is_zero(self):
        store = ArgStore(["prog", "--pi=pie"])
        assert store.get_float("--pi") == 0.0

    def test_last_occurrence_wins(self):
        store = ArgStore(["prog", "--pi=3", "--pi", "3.5"])
        assert store.get_float("--pi") == 3.5

    def test_later_alias_bare_form_overrides_equals_form(self):
        store = ArgStore(["prog", "-f=1.5", "--float", "2"])
        assert store.get_float("-f|--float") == 2.0

    def test_later_alias_equals_form_overrides_bare_form(self):
        store = ArgStore(["prog", "--float", "2", "-f=1.5"])
        assert store.get_float("--float|-f") == 1.5
        assert store.get_float("-f|--float") == 2.0

    def test_repeated_queries_agree(self):
        store = ArgStore(["prog", "--pi", "3.14", "--pi=2.71"])
        assert store.get_float("--pi") == store.get_float("--pi") == 2.71
