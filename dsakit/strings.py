"""String algorithms: anagrams, KMP prefix table, palindromes, unique windows."""

from __future__ import annotations

from collections import Counter
from typing import MutableSequence


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def build_prefix(pattern: str) -> list[int]:
    """Return the KMP prefix table: longest proper prefix that is also a suffix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length > 0:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def _expand(s: str, left: int, right: int) -> str:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return s[left + 1 : right]


def longest_palindrome(s: str) -> str:
    """Return the first longest palindromic substring, expanding around centres."""
    best = ""
    for centre in range(len(s)):
        for candidate in (_expand(s, centre, centre), _expand(s, centre, centre + 1)):
            if len(candidate) > len(best):
                best = candidate
    return best


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    window: set[str] = set()
    left = 0
    best = 0
    for right, char in enumerate(s):
        while char in window:
            window.discard(s[left])
            left += 1
        window.add(char)
        best = max(best, right - left + 1)
    return best


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse a list of characters in place."""
    chars.reverse()


def is_palindrome(s: str) -> bool:
    """Return True if ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [char.lower() for char in s if char.isalnum()]
    return cleaned == cleaned[::-1]