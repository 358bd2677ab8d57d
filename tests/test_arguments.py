"""Tests for the argument tokenizer and value helpers."""

from __future__ import annotations

from taa.commands.arguments import contains_whitespace, is_integer, is_number, tokenize


EDIT_KEYS = ("c", "n", "nn", "m", "w")


class TestTokenize:
    def test_simple_pairs(self):
        assert tokenize("c/CS2113 n/SoftwareEngineering", ("c", "n")) == {
            "c": "CS2113",
            "n": "SoftwareEngineering",
        }

    def test_value_keeps_inner_spaces(self):
        assert tokenize("c/CS2113 n/Software Engineering  Principles", ("c", "n")) == {
            "c": "CS2113",
            "n": "Software Engineering Principles",
        }

    def test_space_in_code_stays_in_value(self):
        assert tokenize("c/CS 2113 n/X", ("c", "n")) == {"c": "CS 2113", "n": "X"}

    def test_order_does_not_matter(self):
        assert tokenize("n/Midterm c/C1 w/60", EDIT_KEYS) == {"n": "Midterm", "c": "C1", "w": "60"}

    def test_longer_key_is_not_confused_with_prefix(self):
        result = tokenize("c/C1 n/Midterm nn/Quiz", EDIT_KEYS)
        assert result == {"c": "C1", "n": "Midterm", "nn": "Quiz"}

    def test_unrecognized_keys_are_dropped(self):
        result = tokenize("c/C1 x/ignored n/Midterm", ("c", "n"))
        assert set(result) == {"c", "n"}
        assert result["c"] == "C1 x/ignored"

    def test_text_before_first_key_is_ignored(self):
        assert tokenize("stray words c/C1", ("c",)) == {"c": "C1"}

    def test_keys_are_case_sensitive(self):
        assert tokenize("C/C1 c/C2", ("c",)) == {"c": "C2"}

    def test_repeated_key_keeps_last_value(self):
        assert tokenize("c/C1 c/C2", ("c",)) == {"c": "C2"}

    def test_empty_value(self):
        assert tokenize("c/ n/Midterm", ("c", "n")) == {"c": "", "n": "Midterm"}

    def test_value_may_contain_separator(self):
        assert tokenize("n/Lab 1/2", ("n",)) == {"n": "Lab 1/2"}

    def test_empty_argument(self):
        assert tokenize("", ("c",)) == {}

    def test_never_returns_undeclared_keys(self):
        result = tokenize("a/1 b/2 c/3", ("c",))
        assert set(result) <= {"c"}


class TestValueHelpers:
    def test_is_integer(self):
        assert is_integer("50")
        assert is_integer("-3")
        assert not is_integer("5.0")
        assert not is_integer("1_000")
        assert not is_integer("fifty")

    def test_is_number(self):
        assert is_number("60")
        assert is_number("33.5")
        assert is_number(".5")
        assert is_number("1e2")
        assert not is_number("nan")
        assert not is_number("inf")
        assert not is_number("60%")

    def test_contains_whitespace(self):
        assert contains_whitespace("CS 2113")
        assert not contains_whitespace("CS2113")
