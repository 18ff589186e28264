"""Substring search by Knuth-Morris-Pratt and by Rabin-Karp rolling hashes."""

from __future__ import annotations

RADIX = 256
DEFAULT_MODULUS = 101


def compute_lps(pattern: str) -> list[int]:
    """Return, for each prefix, the length of its longest proper border."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            i += 1
    return lps


def kmp_search(pattern: str, text: str) -> list[int]:
    """Return every index at which pattern occurs in text, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = compute_lps(pattern)
    n, m = len(text), len(pattern)
    found: list[int] = []
    i = j = 0
    while n - i >= m - j:
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == m:
            found.append(i - j)
            j = lps[j - 1]
        elif i < n and pattern[j] != text[i]:
            if j:
                j = lps[j - 1]
            else:
                i += 1
    return found


def rabin_karp(text: str, pattern: str, modulus: int = DEFAULT_MODULUS) -> list[int]:
    """Return every index at which pattern occurs in text, using a rolling hash."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    n, m = len(text), len(pattern)
    if m > n:
        return []
    high = pow(RADIX, m - 1, modulus)
    p = t = 0
    for pc, tc in zip(pattern, text):
        p = (RADIX * p + ord(pc)) % modulus
        t = (RADIX * t + ord(tc)) % modulus
    found: list[int] = []
    for s in range(n - m + 1):
        if p == t and text[s:s + m] == pattern:
            found.append(s)
        if s < n - m:
            t = (RADIX * (t - ord(text[s]) * high) + ord(text[s + m])) % modulus
    return found