"""Tests for number words."""

import pytest

from resultsgen.text.errors import UnsupportedValueError
from resultsgen.text.numbers import (
    CARDINAL_WORDS,
    ORDINAL_WORDS,
    title_case,
    to_cardinal_word,
    to_ordinal_word,
)


class TestCardinalWords:
    @pytest.mark.parametrize(
        "n, word", [(1, "one"), (2, "two"), (6, "six"), (12, "twelve"), (20, "twenty")]
    )
    def test_known_values(self, n, word):
        assert to_cardinal_word(n) == word

    @pytest.mark.parametrize("n", [0, 21, -1, -20, 100])
    def test_out_of_range_fails(self, n):
        with pytest.raises(UnsupportedValueError) as exc_info:
            to_cardinal_word(n)
        assert exc_info.value.value == n
        assert exc_info.value.kind == "cardinal"

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            to_cardinal_word(21)

    @pytest.mark.parametrize("n", [True, 1.0, "1", None])
    def test_non_integer_fails(self, n):
        with pytest.raises(UnsupportedValueError):
            to_cardinal_word(n)

    def test_table_is_closed(self):
        assert sorted(CARDINAL_WORDS) == list(range(1, 21))


class TestOrdinalWords:
    @pytest.mark.parametrize(
        "n, word",
        [(1, "first"), (2, "second"), (3, "third"), (8, "eighth"), (12, "twelfth"), (20, "twentieth")],
    )
    def test_known_values(self, n, word):
        assert to_ordinal_word(n) == word

    @pytest.mark.parametrize("n", [0, 21, -1])
    def test_out_of_range_fails(self, n):
        with pytest.raises(UnsupportedValueError) as exc_info:
            to_ordinal_word(n)
        assert exc_info.value.kind == "ordinal"
        assert "1 to 20" in str(exc_info.value)

    def test_table_is_closed(self):
        assert sorted(ORDINAL_WORDS) == list(range(1, 21))


class TestTitleCase:
    def test_uppercases_first_character(self):
        assert title_case("first") == "First"

    def test_leaves_remainder_unchanged(self):
        assert title_case("twentieTH") == "TwentieTH"

    def test_single_character(self):
        assert title_case("a") == "A"

    def test_already_title_cased(self):
        assert title_case("Second") == "Second"

    def test_empty_string_fails(self):
        with pytest.raises(ValueError):
            title_case("")
