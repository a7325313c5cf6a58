"""String scanning algorithms."""

from __future__ import annotations


def longest_unique_substring(s: str) -> int:
    """Length of the longest substring of ``s`` without repeated characters."""
    last_seen: dict[str, int] = {}
    left = 0
    best = 0
    for right, ch in enumerate(s):
        previous = last_seen.get(ch)
        if previous is not None and previous >= left:
            left = previous + 1
        last_seen[ch] = right
        best = max(best, right - left + 1)
    return best


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def is_alnum_palindrome(s: str) -> bool:
    """Whether the ASCII letters and digits of ``s`` form a palindrome, ignoring case."""
    kept = [ch.lower() for ch in s if _is_ascii_alnum(ch)]
    return kept == kept[::-1]