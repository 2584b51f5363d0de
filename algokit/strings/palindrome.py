"""Longest palindromic substring via Manacher's algorithm."""

_SEPARATOR = "#"


def manacher(s: str) -> str:
    """Return the longest palindromic substring of ``s``.

    Among equally long palindromes the one furthest to the right wins.
    """
    if len(s) <= 1:
        return s

    chars = _SEPARATOR + _SEPARATOR.join(s) + _SEPARATOR
    size = len(chars)
    lengths = [1] * size
    center = 0
    right_edge = 0

    for i in range(size):
        if right_edge > i > center:
            lengths[i] = min(right_edge - i, lengths[2 * center - i])
            if lengths[i] + i >= right_edge:
                center = i
                right_edge = lengths[i] + i
                if right_edge >= size - 1:
                    break
            else:
                continue

        radius = (lengths[i] - 1) // 2 + 1
        while i >= radius and i + radius <= size - 1 and chars[i - radius] == chars[i + radius]:
            lengths[i] += 2
            radius += 1

    best = max(lengths)
    center_of_max = max(i for i, length in enumerate(lengths) if length == best)
    radius_of_max = (best - 1) // 2
    window = chars[center_of_max - radius_of_max : center_of_max + radius_of_max + 1]
    return window.replace(_SEPARATOR, "")