import string

import pytest

from dsakit.strings import (
    infix_to_postfix,
    is_balanced,
    longest_palindrome,
    number_of_special_chars,
    number_of_subsequences,
    reverse_equation,
)


def test_infix_to_postfix_worked_example():
    assert infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i") == "abcd^e-fgh*+^*+i-"


@pytest.mark.parametrize("expr", ["a+b", "(a+b)*c", "a*(b-(c/d))^e", "x"])
def test_infix_to_postfix_keeps_operands_in_order(expr):
    result = infix_to_postfix(expr)
    letters = [c for c in expr if c.isalpha()]
    assert [c for c in result if c.isalpha()] == letters
    assert "(" not in result and ")" not in result
    assert len(result) == len(expr) - expr.count("(") - expr.count(")")


def test_infix_to_postfix_single_operand():
    assert infix_to_postfix("q") == "q"


def test_longest_palindrome_found_inside():
    core = "abcba"
    assert longest_palindrome("xy" + core + "zq") == core


def test_longest_palindrome_ties_prefer_leftmost():
    s = "abc"
    assert longest_palindrome(s) == s[0]


def test_longest_palindrome_empty():
    assert longest_palindrome("") == ""


@pytest.mark.parametrize("s", ["babad", "cbbd", "forgeeksskeegfor", "aaaa"])
def test_longest_palindrome_invariants(s):
    result = longest_palindrome(s)
    assert result in s
    assert result == result[::-1]
    assert len(result) >= 1


def test_special_chars_all_letters():
    word = string.ascii_lowercase + string.ascii_uppercase
    assert number_of_special_chars(word) == len(string.ascii_lowercase)


def test_special_chars_single_case():
    assert number_of_special_chars(string.ascii_lowercase) == 0
    assert number_of_special_chars(string.ascii_uppercase) == 0


def test_special_chars_duplicates_counted_once():
    assert number_of_special_chars("aaaAAA") == number_of_special_chars("aA")


def test_reverse_equation_worked_example():
    assert reverse_equation("20-3+5*2") == "2*5+3-20"


@pytest.mark.parametrize("eq", ["1+2", "100/5*3-7", "42"])
def test_reverse_equation_round_trip(eq):
    assert reverse_equation(reverse_equation(eq)) == eq


def test_number_of_subsequences_worked_example():
    assert number_of_subsequences("abcdrtbwerrcokokokd", "bcd") == 2


def test_number_of_subsequences_repeated_word():
    w = "xyz"
    times = 3
    assert number_of_subsequences(w * times, w) == times


def test_number_of_subsequences_no_match():
    assert number_of_subsequences("aaaa", "ab") == 0


@pytest.mark.parametrize("text", ["{([])}", "()[]{}", "", "[{()()}]"])
def test_is_balanced_true(text):
    assert is_balanced(text) is True


@pytest.mark.parametrize("text", ["([]", ")", "(]", "{[}]", "(("])
def test_is_balanced_false(text):
    assert is_balanced(text) is False