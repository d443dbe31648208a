import pytest

from dsakit.linked import ListNode, from_iterable, is_palindrome, is_palindrome_inplace

PALINDROMES = [[1], [1, 1], [1, 2, 1], [1, 2, 2, 1], list("racecar")]
NON_PALINDROMES = [[1, 2], [1, 2, 3], [1, 2, 2, 3], list("abca")]


@pytest.mark.parametrize("values", [[1, 2, 3], ["a"], list(range(20))])
def test_from_iterable_round_trip(values):
    head = from_iterable(values)
    assert list(head) == values


def test_from_iterable_empty():
    assert from_iterable([]) is None


def test_from_iterable_links():
    head = from_iterable([7, 8])
    assert head == ListNode(7, ListNode(8))


@pytest.mark.parametrize("values", PALINDROMES)
def test_palindromes(values):
    assert is_palindrome(from_iterable(values)) is True
    assert is_palindrome_inplace(from_iterable(values)) is True


@pytest.mark.parametrize("values", NON_PALINDROMES)
def test_non_palindromes(values):
    assert is_palindrome(from_iterable(values)) is False
    assert is_palindrome_inplace(from_iterable(values)) is False


def test_empty_list_is_palindrome():
    assert is_palindrome(None) is True
    assert is_palindrome_inplace(None) is True


@pytest.mark.parametrize("values", PALINDROMES + NON_PALINDROMES)
def test_inplace_restores_list(values):
    head = from_iterable(values)
    is_palindrome_inplace(head)
    assert list(head) == values