"""Substring search: Knuth-Morris-Pratt and Rabin-Karp."""

_HASH_PRIME = 101
_HASH_BASE = 256


def knuth_morris_pratt(text: str, pattern: str) -> list[int]:
    """Return the start index of every occurrence of ``pattern`` in ``text``.

    Overlapping occurrences are all reported. An empty text or pattern
    yields no matches.
    """
    if not text or not pattern:
        return []

    partial = [0]
    for ch in pattern[1:]:
        j = partial[-1]
        while j > 0 and pattern[j] != ch:
            j = partial[j - 1]
        partial.append(j + 1 if pattern[j] == ch else j)

    matches: list[int] = []
    j = 0
    for i, ch in enumerate(text):
        while j > 0 and ch != pattern[j]:
            j = partial[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == len(pattern):
            matches.append(i + 1 - j)
            j = partial[j - 1]
    return matches


def rolling_hash(s: str) -> int:
    """Return the modulo-101 polynomial hash of ``s`` used by :func:`rabin_karp`.

    Raises ValueError for an empty string.
    """
    if not s:
        raise ValueError("cannot hash an empty string")
    head, last = s[:-1], s[-1]
    result = 0
    for i, byte in enumerate(head.encode("utf-8")):
        if i == 0:
            result = (byte * _HASH_BASE) % _HASH_PRIME
        else:
            result = (((result + byte) % _HASH_PRIME) * _HASH_BASE) % _HASH_PRIME
    return (result + ord(last)) % _HASH_PRIME


def rabin_karp(target: str, pattern: str) -> list[int]:
    """Return the start index of every occurrence of ``pattern`` in ``target``."""
    if not target or not pattern or len(pattern) > len(target):
        return []

    size = len(pattern)
    pattern_hash = rolling_hash(pattern)
    matches: list[int] = []
    for i in range(len(target) - size + 1):
        window = target[i : i + size]
        if rolling_hash(window) == pattern_hash and window == pattern:
            matches.append(i)
    return matches