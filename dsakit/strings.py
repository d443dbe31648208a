"""String algorithms: expression conversion, palindromes and bracket matching."""

from __future__ import annotations

import re

_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}
_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())
_OPERATOR_SPLIT = re.compile(r"([+\-*/])")


def _precedence(ch: str) -> int:
    return _PRECEDENCE.get(ch, -1)


def infix_to_postfix(s: str) -> str:
    """Convert an infix expression with letter operands to postfix notation.

    Operators of equal precedence are treated as left-associative, ``^``
    included. Any character that is not a letter or a parenthesis is handled
    as an operator of the lowest precedence.
    """
    stack: list[str] = []
    out: list[str] = []
    for ch in s:
        if ch == "(":
            stack.append(ch)
        elif ch.isascii() and ch.isalpha():
            out.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                out.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and _precedence(stack[-1]) >= _precedence(ch):
                out.append(stack.pop())
            stack.append(ch)
    out.extend(reversed(stack))
    return "".join(out)


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring, the leftmost one on ties."""
    best_start, best_len = 0, 0
    n = len(s)
    for center in range(2 * n - 1):
        lo = center // 2
        hi = lo + center % 2
        while lo >= 0 and hi < n and s[lo] == s[hi]:
            lo -= 1
            hi += 1
        start, length = lo + 1, hi - lo - 1
        if length > best_len or (length == best_len and start < best_start):
            best_start, best_len = start, length
    return s[best_start:best_start + best_len]


def number_of_special_chars(word: str) -> int:
    """Count distinct characters whose counterpart 32 code points lower also occurs.

    For letters this is the number of lowercase letters that appear in both
    cases.
    """
    chars = set(word)
    return sum(1 for c in chars if ord(c) >= 32 and chr(ord(c) - 32) in chars)


def reverse_equation(s: str) -> str:
    """Reverse the order of operands and operators in an arithmetic expression."""
    return "".join(reversed(_OPERATOR_SPLIT.split(s)))


def number_of_subsequences(s: str, w: str) -> int:
    """Count how many times ``w`` can be picked out of ``s`` as a subsequence.

    Each search starts at an occurrence of ``w[0]`` and greedily consumes
    characters; a character once consumed cannot be used again, even when
    that search did not complete.
    """
    if not w:
        return 0
    chars: list[str | None] = list(s)
    count = 0
    for i, ch in enumerate(chars):
        if ch != w[0]:
            continue
        k = 0
        for j in range(i, len(chars)):
            if k == len(w):
                break
            if chars[j] == w[k]:
                chars[j] = None
                k += 1
        if k == len(w):
            count += 1
    return count


def is_balanced(x: str) -> bool:
    """Check that every bracket in ``x`` is closed by its matching bracket.

    Any character other than an opening bracket is treated as a closing one.
    """
    stack: list[str] = []
    for ch in x:
        if ch in _OPENING:
            stack.append(ch)
        elif stack and _PAIRS.get(ch) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack